from fastapi import status

from .base import AppError


class CustomerNotFound(AppError):
    status_code = status.HTTP_404_NOT_FOUND
    openapi_description = "Returned when the booking customer cannot be found."

    def __init__(self, detail: str):
        super().__init__(detail)

    @classmethod
    def by_phone(cls, phone_number: str) -> "CustomerNotFound":
        return cls(f"No customer found with phone number {phone_number}.")

    @classmethod
    def for_account(cls, account_id: int) -> "CustomerNotFound":
        return cls(f"Account {account_id} has no customer profile.")
