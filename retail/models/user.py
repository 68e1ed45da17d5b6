from sqlalchemy import Column, Integer, String, Float
from retail.core.database import Base


class User(Base):
    __tablename__ = "users"

    id = Column("userid", Integer, primary_key=True)
    name = Column("name", String(50), nullable=False)
    password = Column("password", String(11), nullable=False)
    latitude = Column("latitude", Float, nullable=False)
    longitude = Column("longitude", Float, nullable=False)
    role = Column("type", String(8), nullable=False)
