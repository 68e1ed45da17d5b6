from sqlalchemy import Column, Integer, String, DateTime, ForeignKey
from retail.core.database import Base


class ProductUpdate(Base):
    __tablename__ = "productupdates"

    update_number = Column("updatenumber", Integer, primary_key=True, autoincrement=True)
    manager_id = Column("managerid", Integer, ForeignKey("users.userid"), nullable=False)
    store_id = Column("storeid", Integer, ForeignKey("store.storeid"), nullable=False)
    product_name = Column("productname", String(30), nullable=False)
    updated_on = Column("updatedon", DateTime, nullable=False)
