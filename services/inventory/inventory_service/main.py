"""
    Inventory Service API

    This module implements a FastAPI-based microservice for managing inventory items with full CRUD operations.
    Items are addressed by their article number and persisted in PostgreSQL.

    The service exposes:
    - CRUD endpoints for inventory management under /items
    - Health endpoint: Provides service health status for monitoring and orchestration

    The database connection is retried and the schema provisioned before the
    application starts serving (see startup.py).
"""
import logging
import os
from contextlib import asynccontextmanager
from typing import List, Optional
from urllib.parse import quote

from fastapi import APIRouter, Body, Depends, FastAPI, Request, Response, status
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from . import crud, schemas
from .database import CONNECTION_ERRORS, StoreGateway, get_db
from .exceptions import StoreUnavailable
from .startup import StartupSequencer

logger = logging.getLogger(__name__)

LOG_LEVEL = os.getenv("LOG_LEVEL", "info")

router = APIRouter(prefix="/items", tags=["inventory"])

@router.get("", response_model=List[schemas.InventoryItem])
def list_inventory_items(db: Session = Depends(get_db)):
    """
    List all inventory items.

    Args:
        db: Database session (injected)

    Returns:
        List of inventory item objects, empty if there are none
    """
    return crud.get_inventory_items(db)

@router.get("/{article_number:path}", response_model=schemas.InventoryItem)
def get_inventory_item(article_number: str, db: Session = Depends(get_db)):
    """
    Get a single inventory item by article number.

    Args:
        article_number: Article number of the inventory item to retrieve
        db: Database session (injected)

    Returns:
        Inventory item object, or an empty 404 response if not found
    """
    db_item = crud.get_inventory_item_by_article_number(db, article_number=article_number)
    if db_item is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return db_item

@router.post("", response_model=schemas.InventoryItem, status_code=status.HTTP_201_CREATED)
def create_inventory_item(
    item: schemas.InventoryItemCreate,
    request: Request,
    response: Response,
    db: Session = Depends(get_db)
):
    """
    Create a new inventory item.

    Duplicate article numbers are not rejected.

    Args:
        item: Inventory item data to create (any id is ignored)
        request: Incoming request, used to build the Location header
        response: Outgoing response (injected)
        db: Database session (injected)

    Returns:
        Created inventory item object, with a Location header pointing at it
    """
    db_item = crud.create_inventory_item(db=db, item=item)
    collection_url = str(request.url_for("list_inventory_items")).rstrip("/")
    response.headers["Location"] = f"{collection_url}/{quote(db_item.article_number, safe='')}"
    return db_item

@router.put("/{article_number:path}", response_model=schemas.InventoryItem)
def update_inventory_item_quantity(
    article_number: str,
    quantity: int = Body(...),
    db: Session = Depends(get_db)
):
    """
    Set the quantity of an existing inventory item.

    The request body is the bare new quantity, e.g. ``3``. No other field changes.

    Args:
        article_number: Article number of the inventory item to update
        quantity: New quantity
        db: Database session (injected)

    Returns:
        Updated inventory item object, or an empty 404 response if not found
    """
    db_item = crud.update_inventory_item_quantity(db, article_number=article_number, quantity=quantity)
    if db_item is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return db_item

@router.delete("/{article_number:path}", status_code=status.HTTP_204_NO_CONTENT)
def delete_inventory_item(article_number: str, db: Session = Depends(get_db)):
    """
    Delete an inventory item.

    Args:
        article_number: Article number of the inventory item to delete
        db: Database session (injected)

    Returns:
        None (204 No Content), or an empty 404 response if not found
    """
    success = crud.delete_inventory_item(db, article_number=article_number)
    if not success:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


async def store_error_handler(request: Request, exc: Exception) -> JSONResponse:
    if isinstance(exc, (StoreUnavailable,) + CONNECTION_ERRORS):
        logger.exception(f"Inventory store unavailable during {request.method} {request.url.path}")
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"detail": "Inventory store unavailable"},
        )
    logger.exception(f"Inventory store error during {request.method} {request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Inventory store error"},
    )


def configure_logging(level: str = LOG_LEVEL) -> None:
    """
    Send the service's log records to stderr at the configured level.

    basicConfig leaves an already configured root logger alone, so this is
    safe under any launcher; the package logger level is always applied.
    """
    logging.basicConfig(format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    logging.getLogger(__package__).setLevel(level.upper())


def create_app(store: Optional[StoreGateway] = None, sequencer: Optional[StartupSequencer] = None) -> FastAPI:
    """
    Build the inventory FastAPI application.

    Args:
        store: Database gateway; one is created from DATABASE_URL when omitted
        sequencer: Startup sequence to run before serving; defaults to the
            configured retry bound and delay against ``store``

    Returns:
        FastAPI application. Startup fails if the database stays unreachable.

    Usage:
        uvicorn --factory inventory_service.main:create_app
    """
    configure_logging()
    store = store or StoreGateway()
    sequencer = sequencer or StartupSequencer(store)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        await run_in_threadpool(sequencer.run)
        logger.info("Inventory service ready")
        yield
        store.dispose()

    app = FastAPI(title="inventory-service", lifespan=lifespan)
    app.state.store = store
    app.add_exception_handler(StoreUnavailable, store_error_handler)
    app.add_exception_handler(SQLAlchemyError, store_error_handler)

    @app.get("/healthz", response_model=dict)
    def health():
        """
        Health check endpoint for the inventory service.

        This endpoint is typically used by orchestrators (like Kubernetes) or load balancers
        to determine if the service is running and ready to accept requests. The
        application only starts answering once the database is provisioned.

        Returns:
            dict: A dictionary containing the health status of the service.
                - status (str): "healthy" if the service is operational.

        Example:
            GET /healthz
            Response: {"status": "healthy"}
        """
        return {"status": "healthy"}

    app.include_router(router)
    return app

