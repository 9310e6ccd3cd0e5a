from .exceptions import (
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

__all__ = [
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
]
