from sqlmodel import Session, select

from app.models.customer import Customer


def get_customer_by_phone(*, session: Session, phone_number: str) -> Customer | None:
    statement = select(Customer).where(Customer.phone_number == phone_number)
    return session.exec(statement).first()


def get_customer_by_account_id(*, session: Session, account_id: int) -> Customer | None:
    statement = select(Customer).where(Customer.account_id == account_id)
    return session.exec(statement).first()


def create_walk_in_customer(
    *,
    session: Session,
    account_id: int,
    full_name: str,
) -> Customer:
    """
    Create a customer profile for an account that books at the counter
    without naming a registered customer. Flushes so the id is available.
    """
    customer = Customer(full_name=full_name, account_id=account_id)
    session.add(customer)
    session.flush()
    return customer
