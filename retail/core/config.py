import os
from dotenv import load_dotenv

load_dotenv()

DB_HOST = os.getenv("RETAIL_DB_HOST", "localhost")
DB_DRIVER = os.getenv("RETAIL_DB_DRIVER", "postgresql+asyncpg")
# Пароль по умолчанию пустой, аргумент командной строки имеет приоритет
DB_PASSWORD = os.getenv("RETAIL_DB_PASSWORD", "")


LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING").upper()
LOG_FILE = os.getenv("LOG_FILE")


# Хотя бы одна попытка ввода, иначе меню зациклится без чтения stdin
MAX_CHOICE_ATTEMPTS = max(1, int(os.getenv("MAX_CHOICE_ATTEMPTS", "5")))
