from sqlalchemy.orm import Session
from config.settings import settings
from store.repositories import AdminAccountRepository
from utils.auth import hash_password
import logging

logger = logging.getLogger(__name__)


def bootstrap_admin(db: Session):
    """Seed the administrator configured in ADMIN_EMAIL / ADMIN_PASSWORD if not already present."""
    if not settings.ADMIN_EMAIL or not settings.ADMIN_PASSWORD:
        logger.info("ADMIN_EMAIL/ADMIN_PASSWORD not set. Skipping admin bootstrap.")
        return None

    admin_repo = AdminAccountRepository(db)
    admin = admin_repo.get_by_email(settings.ADMIN_EMAIL)
    if admin:
        logger.info("Admin already seeded. Skipping bootstrap.")
        return admin

    admin = admin_repo.create(
        {
            "name": settings.ADMIN_NAME,
            "email": settings.ADMIN_EMAIL,
            "password": hash_password(settings.ADMIN_PASSWORD),
        }
    )
    db.commit()
    logger.info(f"Admin seeded with ID {admin.id}")
    return admin
