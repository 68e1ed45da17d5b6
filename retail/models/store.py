from sqlalchemy import Column, Integer, String, Float, Date, ForeignKey
from retail.core.database import Base


class Store(Base):
    __tablename__ = "store"

    id = Column("storeid", Integer, primary_key=True)
    name = Column("name", String(30), nullable=False)
    latitude = Column("latitude", Float, nullable=False)
    longitude = Column("longitude", Float, nullable=False)
    manager_id = Column("managerid", Integer, ForeignKey("users.userid"), nullable=False)
    date_established = Column("dateestablished", Date)
