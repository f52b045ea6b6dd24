"""SQLAlchemy implementation of the Unit of Work port."""

from sqlalchemy.orm import Session

from examelement.application.common.unit_of_work import UnitOfWork


class SqlAlchemyUnitOfWork(UnitOfWork):
    """
    Unit of Work over the request's session.

    Repositories only flush, so everything written between two commits
    lands in one transaction.
    """

    def __init__(self, db: Session) -> None:
        self.db = db

    def commit(self) -> None:
        self.db.commit()

    def rollback(self) -> None:
        self.db.rollback()
