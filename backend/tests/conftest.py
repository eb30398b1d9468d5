import sys
from pathlib import Path

# Add backend directory to Python path FIRST
backend_dir = Path(__file__).parent.parent
sys.path.insert(0, str(backend_dir))

# Now import after path is set
import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from models import Base, Product, ProductBrand, ProductType


@pytest.fixture
def db_session():
    """Create in-memory database for testing"""
    # StaticPool keeps one connection so TestClient threads see the same database
    engine = create_engine(
        'sqlite:///:memory:',
        connect_args={'check_same_thread': False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    SessionLocal = sessionmaker(bind=engine)
    session = SessionLocal()
    yield session
    session.close()
    engine.dispose()


@pytest.fixture
def catalog(db_session):
    """
    12 products over 2 brands and 2 types.

    Names sort as "Product 01" .. "Product 12". Brand 1 owns the odd
    products, brand 2 the even ones. Type 1 covers products 1-6, type 2
    products 7-12. Prices run in the opposite direction to names except
    that products 05 and 06 share a price.
    """
    brands = [ProductBrand(id=1, name="Angular"), ProductBrand(id=2, name="React")]
    types = [ProductType(id=1, name="Boards"), ProductType(id=2, name="Boots")]
    db_session.add_all(brands + types)

    prices = [120, 110, 100, 90, 80, 80, 60, 50, 40, 30, 20, 10]
    products = []
    # Insert in shuffled order so id order and name order differ
    for n in [7, 3, 12, 1, 9, 5, 11, 2, 8, 4, 10, 6]:
        products.append(Product(
            name=f"Product {n:02d}",
            description=f"Description {n}",
            picture_url=f"images/products/p{n}.png",
            price=prices[n - 1],
            product_brand_id=1 if n % 2 else 2,
            product_type_id=1 if n <= 6 else 2,
        ))
    db_session.add_all(products)
    db_session.commit()
    ids_by_name = {p.name: p.id for p in products}

    # Detach everything so tests observe what queries load, not the identity map
    db_session.expunge_all()
    return ids_by_name
