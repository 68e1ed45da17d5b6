from sqlalchemy import Column, Integer, String, ForeignKey
from retail.core.database import Base


class ProductSupplyRequest(Base):
    __tablename__ = "productsupplyrequests"

    request_number = Column("requestnumber", Integer, primary_key=True, autoincrement=True)
    manager_id = Column("managerid", Integer, ForeignKey("users.userid"), nullable=False)
    warehouse_id = Column(
        "warehouseid", Integer, ForeignKey("warehouse.warehouseid"), nullable=False
    )
    store_id = Column("storeid", Integer, ForeignKey("store.storeid"), nullable=False)
    product_name = Column("productname", String(30), nullable=False)
    units_requested = Column("unitsrequested", Integer, nullable=False)
