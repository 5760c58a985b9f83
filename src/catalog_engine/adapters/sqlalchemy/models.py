"""SQLAlchemy ORM models for products and categories."""
from __future__ import annotations

from decimal import Decimal

from sqlalchemy import Boolean, ForeignKey, Integer, Numeric, String, Text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship

from catalog_engine.adapters.sqlalchemy.mixins import TimestampMixin


class Base(DeclarativeBase):
    pass


def _barcode() -> Mapped[str]:
    return mapped_column(String(100), nullable=False, default="")


def _image() -> Mapped[str]:
    return mapped_column(String(500), nullable=False, default="")


def _measure() -> Mapped[Decimal]:
    return mapped_column(Numeric(10, 2), nullable=False, default=Decimal("0"))


class CategoryRecord(TimestampMixin, Base):
    __tablename__ = "categories"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False, unique=True)
    description: Mapped[str] = mapped_column(String(500), nullable=False, default="")
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)


class ProductRecord(TimestampMixin, Base):
    __tablename__ = "products"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    sku: Mapped[str] = mapped_column(String(100), nullable=False, default="")
    brand: Mapped[str] = mapped_column(String(100), nullable=False, default="")
    category: Mapped[str] = mapped_column(String(100), nullable=False, default="")
    ean_code: Mapped[str] = mapped_column(String(50), nullable=False, default="")

    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    features: Mapped[str] = mapped_column(Text, nullable=False, default="")
    notes: Mapped[str] = mapped_column(Text, nullable=False, default="")
    material: Mapped[str] = mapped_column(String(100), nullable=False, default="")
    color: Mapped[str] = mapped_column(String(50), nullable=False, default="")

    weight: Mapped[Decimal] = _measure()
    desi: Mapped[Decimal] = _measure()
    width: Mapped[Decimal] = _measure()
    height: Mapped[Decimal] = _measure()
    depth: Mapped[Decimal] = _measure()
    warranty_months: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    image_url: Mapped[str] = _image()
    image_url1: Mapped[str] = _image()
    image_url2: Mapped[str] = _image()
    image_url3: Mapped[str] = _image()
    image_url4: Mapped[str] = _image()
    image_url5: Mapped[str] = _image()

    trendyol_barcode: Mapped[str] = _barcode()
    hepsiburada_barcode: Mapped[str] = _barcode()
    hepsiburada_seller_stock_code: Mapped[str] = _barcode()
    hepsiburada_tedarik_barcode: Mapped[str] = _barcode()
    amazon_barcode: Mapped[str] = _barcode()
    koctas_barcode: Mapped[str] = _barcode()
    koctas_istanbul_barcode: Mapped[str] = _barcode()
    n11_product_code: Mapped[str] = _barcode()
    n11_catalog_id: Mapped[str] = _barcode()
    pazarama_barcode: Mapped[str] = _barcode()
    pttavm_barcode: Mapped[str] = _barcode()
    haceyapi_barcode: Mapped[str] = _barcode()
    spare_barcode1: Mapped[str] = _barcode()
    spare_barcode2: Mapped[str] = _barcode()
    spare_barcode3: Mapped[str] = _barcode()
    spare_barcode4: Mapped[str] = _barcode()
    logo_barcodes: Mapped[str] = mapped_column(Text, nullable=False, default="")
    koctas_ean_barcode: Mapped[str] = _barcode()
    koctas_ean_istanbul_barcode: Mapped[str] = _barcode()
    ptt_urun_stok_kodu: Mapped[str] = _barcode()

    is_archived: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False, index=True)

    category_id: Mapped[int | None] = mapped_column(
        ForeignKey("categories.id", ondelete="SET NULL"), nullable=True
    )
    category_entity: Mapped[CategoryRecord | None] = relationship(lazy="raise")


__all__ = ["Base", "CategoryRecord", "ProductRecord"]
