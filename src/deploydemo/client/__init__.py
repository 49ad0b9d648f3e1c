from .app import SEND_FAILED, ClientApp
from .requests import ApiClient, ApiError, Dataset, Health, Item, MessageResult
from .state import Phase, SectionState

__all__ = [
    "ApiClient",
    "ApiError",
    "ClientApp",
    "Dataset",
    "Health",
    "Item",
    "MessageResult",
    "Phase",
    "SEND_FAILED",
    "SectionState",
]
