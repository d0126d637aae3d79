"""
CRUD (Create, Read, Update, Delete) operations for the Inventory service.

This module contains all database operations for inventory management.
Items are addressed by article number; when several rows share one, the
first match wins.
"""
from typing import List, Optional
from sqlalchemy.orm import Session
from . import models, schemas

def get_inventory_item_by_article_number(db: Session, article_number: str) -> Optional[models.InventoryItem]:
    """
    Retrieve an inventory item by article number.

    Args:
        db: Database session
        article_number: Article number to search for

    Returns:
        InventoryItem object or None if not found
    """
    return (
        db.query(models.InventoryItem)
        .filter(models.InventoryItem.article_number == article_number)
        .order_by(models.InventoryItem.id)
        .first()
    )

def get_inventory_items(db: Session) -> List[models.InventoryItem]:
    """
    Retrieve every inventory item.

    Args:
        db: Database session

    Returns:
        List of InventoryItem objects, empty when the store holds none
    """
    return db.query(models.InventoryItem).all()

def create_inventory_item(db: Session, item: schemas.InventoryItemCreate) -> models.InventoryItem:
    """
    Create a new inventory item in the database.

    Args:
        db: Database session
        item: Inventory item data to create

    Returns:
        Created InventoryItem object, with its id assigned
    """
    db_item = models.InventoryItem(
        article_number=item.article_number,
        name=item.name,
        quantity=item.quantity,
        location=item.location,
        supplier=item.supplier,
    )
    db.add(db_item)
    db.commit()
    db.refresh(db_item)
    return db_item

def update_inventory_item_quantity(db: Session, article_number: str, quantity: int) -> Optional[models.InventoryItem]:
    """
    Overwrite the quantity of an existing inventory item.

    Args:
        db: Database session
        article_number: Article number of the item to update
        quantity: New quantity (negative values are accepted)

    Returns:
        Updated InventoryItem object or None if not found
    """
    db_item = get_inventory_item_by_article_number(db, article_number)
    if db_item is None:
        return None

    db_item.quantity = quantity
    db.commit()
    db.refresh(db_item)
    return db_item

def delete_inventory_item(db: Session, article_number: str) -> bool:
    """
    Delete an inventory item from the database.

    Args:
        db: Database session
        article_number: Article number of the item to delete

    Returns:
        True if item was deleted, False if not found
    """
    db_item = get_inventory_item_by_article_number(db, article_number)
    if db_item is None:
        return False

    db.delete(db_item)
    db.commit()
    return True
