from sqlalchemy import Column, Integer, Float
from retail.core.database import Base


class Warehouse(Base):
    __tablename__ = "warehouse"

    id = Column("warehouseid", Integer, primary_key=True)
    area = Column("area", Float)
    latitude = Column("latitude", Float, nullable=False)
    longitude = Column("longitude", Float, nullable=False)
