"""
Exceptions raised by the Inventory service persistence layer.
"""


class StoreUnavailable(Exception):
    """The inventory database could not be reached."""
