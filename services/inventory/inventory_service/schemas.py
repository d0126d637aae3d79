"""
Pydantic schemas for request/response validation in the Inventory service.

These schemas define the structure of data for API requests and responses.
Field names are exposed in camelCase on the wire (``articleNumber``).
"""
from pydantic import BaseModel
from pydantic.alias_generators import to_camel

class InventoryItemBase(BaseModel):
    """Base schema with common inventory item attributes."""
    article_number: str = ""
    name: str = ""
    quantity: int = 0
    location: str = ""
    supplier: str = ""

    class Config:
        alias_generator = to_camel
        populate_by_name = True

class InventoryItemCreate(InventoryItemBase):
    """Schema for creating a new inventory item. A client-supplied id is ignored."""
    pass

class InventoryItem(InventoryItemBase):
    """
    Schema for inventory item responses, includes all database fields.

    Attributes:
        id (int): Identifier assigned by the database
        article_number (str): Article number (``articleNumber``)
        name (str): Descriptive label
        quantity (int): Quantity in stock
        location (str): Storage location
        supplier (str): Supplier name
    """
    id: int

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True
