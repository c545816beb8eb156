from sqlmodel import Field, SQLModel


class BaseModel(SQLModel):
    """
    Common base for table models.

    Every table has an autoincrement integer primary key named ``id``; the
    list-query translator uses it as the final sort tie-breaker.
    """

    id: int | None = Field(default=None, primary_key=True)
