from backend.src.core.entities.account import FREE_CREDITS, Account
from backend.src.core.entities.conversion import Conversion
from backend.src.core.entities.purchase import Purchase
from backend.src.core.entities.user import User

__all__ = ["Account", "Conversion", "FREE_CREDITS", "Purchase", "User"]
