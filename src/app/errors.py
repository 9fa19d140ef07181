class StoreError(Exception):
    """Unexpected failure inside the credential or session store"""


class StoreUnavailableError(StoreError):
    """The credential or session store cannot be reached"""
