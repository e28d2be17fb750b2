from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


# ---------- Input records ----------
class SubscriberRecord(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="ignore")

    email: str = Field(..., alias="Email", description="Email of the subscriber")
    created_at: str = Field(..., alias="Created_at", description="Subscriber account creation timestamp")


class UserRecord(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="ignore")

    nick: str = Field("", alias="Nick")
    email: str = Field(..., alias="Email", description="Unique user identifier")
    created_at: str = Field(..., alias="Created_at")
    subscribers: List[SubscriberRecord] = Field(
        default_factory=list,
        alias="Subscribers",
        description="People subscribed to this user, in file order",
    )


class PathQuery(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    from_email: str = Field(..., alias="from")
    to_email: str = Field(..., alias="to")


# ---------- Output records ----------
class PathNode(BaseModel):
    email: str
    created_at: str


class PathResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int = Field(..., ge=1)
    from_email: str = Field(..., alias="from")
    to_email: str = Field(..., alias="to")
    path: Optional[List[PathNode]] = Field(
        default=None,
        description="Intermediate users between the endpoints; None when unreachable or from == to",
    )

    def to_json_dict(self) -> dict:
        """Wire shape: id/from/to, plus `path` only when it has entries."""
        data = self.model_dump(by_alias=True, exclude={"path"})
        if self.path:
            data["path"] = [node.model_dump() for node in self.path]
        return data
