from typing import List, Optional
from sqlalchemy import select
from sqlalchemy.orm import Session
from catalogue.domain.models import Product


class ProductRepository:
    def __init__(self, db: Session):
        self.db = db

    def add(self, product: Product) -> Product:
        self.db.add(product)
        self.db.commit()
        self.db.refresh(product)
        return product

    def get(self, product_id: int) -> Optional[Product]:
        return self.db.get(Product, product_id)

    def list(self) -> List[Product]:
        return list(self.db.execute(select(Product).order_by(Product.id)).scalars().all())
