from collections.abc import Iterable

from sqlmodel import Session, col, select

from app.models.food import Food


def get_available_foods(
    *,
    session: Session,
    food_ids: Iterable[int],
) -> dict[int, Food]:
    """
    Get the foods among `food_ids` that exist and are currently on sale.

    Parameters:
        session (Session): The database session.
        food_ids (Iterable[int]): The food ids to look up.
    Returns:
        dict[int, Food]: Available foods keyed by id.
    """
    stmt = select(Food).where(
        col(Food.id).in_(list(food_ids)),
        col(Food.is_available).is_(True),
    )
    return {food.id: food for food in session.exec(stmt).all()}
