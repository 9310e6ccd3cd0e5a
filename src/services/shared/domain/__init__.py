from .entity import AggregateRoot, Entity
from .exception import (
    AccountNotFoundException,
    BusinessRuleViolationException,
    DomainException,
    DuplicateResourceException,
    IndexOutOfRangeException,
    InvalidInputException,
    InvalidQuantityException,
    InvalidRangeException,
    OptimisticLockException,
    PersistenceException,
    ResourceNotFoundException,
    UnauthenticatedException,
)
from .value_object import AccountId, Currency, IsoDateTime, Money

__all__ = [
    "Entity",
    "AggregateRoot",
    "DomainException",
    "DuplicateResourceException",
    "ResourceNotFoundException",
    "BusinessRuleViolationException",
    "OptimisticLockException",
    "UnauthenticatedException",
    "AccountNotFoundException",
    "PersistenceException",
    "InvalidQuantityException",
    "InvalidRangeException",
    "IndexOutOfRangeException",
    "InvalidInputException",
    "AccountId",
    "Currency",
    "Money",
    "IsoDateTime",
]
