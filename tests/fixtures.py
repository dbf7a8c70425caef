from datetime import date
from decimal import Decimal

from sqlalchemy import ForeignKey, Numeric, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from nebula_admin import ActiveRecordMixin


class Base(DeclarativeBase):
    pass


class Category(ActiveRecordMixin, Base):
    __tablename__ = 'category'

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(String(80))


class Post(ActiveRecordMixin, Base):
    __tablename__ = 'post'

    id: Mapped[int] = mapped_column(primary_key=True)
    title: Mapped[str] = mapped_column(String(150))
    body: Mapped[str] = mapped_column(String(2000), default='')
    status: Mapped[str] = mapped_column(String(20), default='draft')
    published: Mapped[bool] = mapped_column(default=False)
    price: Mapped[Decimal] = mapped_column(Numeric(10, 2), default=0)
    created_on: Mapped[date] = mapped_column(default=date(2024, 1, 1))
    category_id: Mapped[int | None] = mapped_column(ForeignKey('category.id'))

    def __repr__(self):
        return f"Post({self.title})"


class BlogPost(ActiveRecordMixin, Base):
    __tablename__ = 'blog_post'

    id: Mapped[int] = mapped_column(primary_key=True)
    title: Mapped[str] = mapped_column(String(150))
