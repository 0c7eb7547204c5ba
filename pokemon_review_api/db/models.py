# pokemon_review_api/db/models.py

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from sqlalchemy import DateTime, ForeignKey, Index, Integer, String, Text, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship


# ---------------------------------------------------------------------------
# Base
# ---------------------------------------------------------------------------


class Base(DeclarativeBase):
    """
    Base class for all ORM models.
    """


# ---------------------------------------------------------------------------
# Lookup entities
# ---------------------------------------------------------------------------


class Category(Base):
    """
    A pokemon category (e.g. "Water", "Fire").

    Names are unique ignoring case and surrounding whitespace. The create
    endpoints compare with Python's `strip().upper()`. The expression
    index below is a narrower store-side guard: on SQLite `lower()` folds
    ASCII letters only and `trim()` strips spaces only, so names differing in
    non-ASCII case or in tabs and newlines are caught by the create check
    alone.
    """

    __tablename__ = "categories"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)

    pokemon_categories: Mapped[List["PokemonCategory"]] = relationship(
        back_populates="category",
        cascade="all, delete-orphan",
    )


class Country(Base):
    """
    A country owners live in.
    """

    __tablename__ = "countries"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)

    owners: Mapped[List["Owner"]] = relationship(back_populates="country")


CATEGORY_NAME_INDEX = "uq_categories_normalized_name"
COUNTRY_NAME_INDEX = "uq_countries_normalized_name"

Index(
    CATEGORY_NAME_INDEX,
    func.lower(func.trim(Category.name)),
    unique=True,
)
Index(
    COUNTRY_NAME_INDEX,
    func.lower(func.trim(Country.name)),
    unique=True,
)


# ---------------------------------------------------------------------------
# People
# ---------------------------------------------------------------------------


class Owner(Base):
    """
    A trainer owning pokemon. Belongs to exactly one country.
    """

    __tablename__ = "owners"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    first_name: Mapped[str] = mapped_column(String(255), nullable=False)
    last_name: Mapped[str] = mapped_column(String(255), nullable=False)
    gym: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)

    country_id: Mapped[int] = mapped_column(
        ForeignKey("countries.id"),
        nullable=False,
        index=True,
    )
    country: Mapped[Country] = relationship(back_populates="owners")

    pokemon_owners: Mapped[List["PokemonOwner"]] = relationship(
        back_populates="owner",
        cascade="all, delete-orphan",
    )


class Reviewer(Base):
    """
    Someone who writes reviews.
    """

    __tablename__ = "reviewers"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    first_name: Mapped[str] = mapped_column(String(255), nullable=False)
    last_name: Mapped[str] = mapped_column(String(255), nullable=False)

    reviews: Mapped[List["Review"]] = relationship(
        back_populates="reviewer",
        cascade="all, delete-orphan",
    )


# ---------------------------------------------------------------------------
# Pokemon and its associations
# ---------------------------------------------------------------------------


class Pokemon(Base):
    __tablename__ = "pokemon"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    birth_date: Mapped[datetime] = mapped_column(DateTime, nullable=False)

    reviews: Mapped[List["Review"]] = relationship(
        back_populates="pokemon",
        cascade="all, delete-orphan",
    )
    pokemon_owners: Mapped[List["PokemonOwner"]] = relationship(
        back_populates="pokemon",
        cascade="all, delete-orphan",
    )
    pokemon_categories: Mapped[List["PokemonCategory"]] = relationship(
        back_populates="pokemon",
        cascade="all, delete-orphan",
    )


class PokemonOwner(Base):
    """
    Join row: one pokemon held by one owner.
    """

    __tablename__ = "pokemon_owners"

    pokemon_id: Mapped[int] = mapped_column(
        ForeignKey("pokemon.id", ondelete="CASCADE"),
        primary_key=True,
    )
    owner_id: Mapped[int] = mapped_column(
        ForeignKey("owners.id", ondelete="CASCADE"),
        primary_key=True,
    )

    pokemon: Mapped[Pokemon] = relationship(back_populates="pokemon_owners")
    owner: Mapped[Owner] = relationship(back_populates="pokemon_owners")


class PokemonCategory(Base):
    """
    Join row: one pokemon filed under one category.
    """

    __tablename__ = "pokemon_categories"

    pokemon_id: Mapped[int] = mapped_column(
        ForeignKey("pokemon.id", ondelete="CASCADE"),
        primary_key=True,
    )
    category_id: Mapped[int] = mapped_column(
        ForeignKey("categories.id", ondelete="CASCADE"),
        primary_key=True,
    )

    pokemon: Mapped[Pokemon] = relationship(back_populates="pokemon_categories")
    category: Mapped[Category] = relationship(back_populates="pokemon_categories")


class Review(Base):
    """
    A rated review of one pokemon written by one reviewer.
    """

    __tablename__ = "reviews"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    text: Mapped[str] = mapped_column(Text, nullable=False, default="")
    rating: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    pokemon_id: Mapped[int] = mapped_column(
        ForeignKey("pokemon.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    reviewer_id: Mapped[int] = mapped_column(
        ForeignKey("reviewers.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    pokemon: Mapped[Pokemon] = relationship(back_populates="reviews")
    reviewer: Mapped[Reviewer] = relationship(back_populates="reviews")


__all__ = [
    "Base",
    "CATEGORY_NAME_INDEX",
    "COUNTRY_NAME_INDEX",
    "Category",
    "Country",
    "Owner",
    "Reviewer",
    "Pokemon",
    "PokemonOwner",
    "PokemonCategory",
    "Review",
]
