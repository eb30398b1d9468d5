from sqlalchemy import Column, String, Integer, Numeric, Text, ForeignKey, CheckConstraint, Index
from sqlalchemy.orm import relationship
from database import Base


class ProductBrand(Base):
    __tablename__ = 'product_brands'

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String, nullable=False)


class ProductType(Base):
    __tablename__ = 'product_types'

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String, nullable=False)


class Product(Base):
    """
    A catalog product.

    Brand and type are many-to-one lookups. They are not loaded unless a
    query asks for them (see repositories.product_specifications), so
    listing endpoints always go through a specification that includes both.
    """
    __tablename__ = 'products'

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String, nullable=False)
    description = Column(Text, nullable=False)
    picture_url = Column(String, nullable=False)
    price = Column(Numeric(18, 2, asdecimal=False), nullable=False)
    product_brand_id = Column(Integer, ForeignKey('product_brands.id'), nullable=False)
    product_type_id = Column(Integer, ForeignKey('product_types.id'), nullable=False)

    product_brand = relationship("ProductBrand", lazy="select")
    product_type = relationship("ProductType", lazy="select")

    __table_args__ = (
        CheckConstraint("name != ''"),
        CheckConstraint("price >= 0"),
        Index('idx_products_brand', 'product_brand_id'),
        Index('idx_products_type', 'product_type_id'),
    )
