from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from sqlalchemy import String

NAME_MAX_LENGTH = 200
DESCRIPTION_MAX_LENGTH = 2000

class Base(DeclarativeBase):
    pass

class Product(Base):
    __tablename__ = "products"
    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(NAME_MAX_LENGTH))
    description: Mapped[str] = mapped_column(String(DESCRIPTION_MAX_LENGTH))
