from init_db import seed_catalog
from models import Product, ProductBrand, ProductType


def test_seed_catalog_fills_empty_tables(db_session):
    inserted = seed_catalog(db_session)

    assert db_session.query(ProductBrand).count() == 6
    assert db_session.query(ProductType).count() == 4
    assert db_session.query(Product).count() == 18
    assert inserted == 28


def test_seeded_products_reference_existing_brand_and_type(db_session):
    seed_catalog(db_session)

    for product in db_session.query(Product).all():
        assert product.product_brand is not None
        assert product.product_type is not None
        assert product.picture_url.startswith("images/products/")


def test_seed_catalog_skips_populated_tables(db_session):
    seed_catalog(db_session)

    assert seed_catalog(db_session) == 0
    assert db_session.query(Product).count() == 18


def test_seed_catalog_leaves_existing_catalog_alone(db_session, catalog):
    seed_catalog(db_session)

    assert db_session.query(ProductBrand).count() == 2
    assert db_session.query(Product).count() == 12
