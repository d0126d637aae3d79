"""
SQLAlchemy ORM models for the Inventory service.

Defines the database schema for inventory-related tables.
"""
from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import declarative_base

# Base class for declarative models
Base = declarative_base()

class InventoryItem(Base):
    """
    Inventory item model representing a stocked article.

    Attributes:
        id (int): Primary key, assigned by the database
        article_number (str): Article number used to look the item up
        name (str): Descriptive label
        quantity (int): Quantity in stock, no lower bound
        location (str): Free-text storage location
        supplier (str): Free-text supplier name
    """
    __tablename__ = "inventory_items"

    id = Column(Integer, primary_key=True, index=True)
    # Not unique: duplicates are accepted and lookups return the first match.
    article_number = Column(String, index=True, nullable=False)
    name = Column(String, nullable=False, default="")
    quantity = Column(Integer, nullable=False, default=0)
    location = Column(String, nullable=False, default="")
    supplier = Column(String, nullable=False, default="")
