from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
import logging

from kidcode.core.exceptions import Conflict, StorageFailure
from kidcode.core.security import hash_password
from kidcode.models.user_model import User
from kidcode.schemas.user_schema import UserRegisterRequest

logger = logging.getLogger(__name__)


def get_user_by_id(db: Session, user_id: int) -> User | None:
    """Fetches a user by their internal database ID."""
    logger.debug(f"Fetching user by ID: {user_id}")
    return db.query(User).filter(User.id == user_id).first()

def get_user_by_email(db: Session, email: str) -> User | None:
    """Fetches a user by their email address."""
    logger.debug(f"Fetching user by email: {email}")
    return db.query(User).filter(User.email == email).first()

def create_user(db: Session, user_data: UserRegisterRequest) -> User:
    """
    Creates a new user with a bcrypt password hash.

    Raises:
        Conflict: if the email is already registered (checked up front and
            again through the unique constraint, which wins any race).
        StorageFailure: for any other database error.
    """
    logger.info(f"Attempting to create user for email: {user_data.email}")

    if get_user_by_email(db, user_data.email):
        logger.warning(f"User creation failed: Email {user_data.email} already exists.")
        raise Conflict("Email already registered")

    db_user = User(
        email=user_data.email,
        password_hash=hash_password(user_data.password),
        display_name=user_data.display_name.strip(),
    )

    try:
        db.add(db_user)
        db.commit()
        db.refresh(db_user)
    except IntegrityError as e:
        db.rollback()
        logger.warning(f"Integrity error during user creation for {user_data.email}: {e}")
        raise Conflict("Email already registered") from e
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Unexpected error during user creation for {user_data.email}: {e}", exc_info=True)
        raise StorageFailure("Registration failed") from e

    logger.info(f"User created successfully: {db_user.email} (ID: {db_user.id})")
    return db_user
