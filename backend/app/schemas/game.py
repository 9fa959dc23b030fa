"""
GameShelf Backend — Pydantic Response Schemas
===============================================

What:  Pydantic models defining the JSON the API returns.
Why:   Automatic serialization and OpenAPI doc generation.
How:   Fields use snake_case in Python and camelCase aliases on the wire
       (`releaseDate`, `deletedCount`). `populate_by_name` lets the same
       model be built from ORM attributes and re-validated from its own
       aliased output, which FastAPI does when applying response_model.

Request bodies are NOT modelled here: create/update accept any JSON object
so that missing fields reach app.validation and produce the 422 contract
instead of FastAPI's default validation body.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field


class GameResponse(BaseModel):
    """
    What:  Full representation of a Game.
    Who:   Returned by create, update, and (as array items) list.

    The identifier is exposed twice: `_id` (what existing clients compare
    against) and `id`.
    """
    id: str = Field(description="Unique game identifier")
    title: str = Field(description="Game title")
    genre: str = Field(description="Game genre")
    release_date: Optional[str] = Field(
        default=None,
        alias="releaseDate",
        description="Free-form release date (null when not supplied)",
    )

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    @computed_field(alias="_id")
    @property
    def object_id(self) -> str:
        return self.id


class DeleteResult(BaseModel):
    """
    What:  Outcome of DELETE /api/game/destroy/{id}.
    Why:   The endpoint answers 200 whether or not a record existed;
           deletedCount tells the two cases apart.
    """
    acknowledged: bool = Field(default=True, description="The store processed the delete")
    deleted_count: int = Field(
        alias="deletedCount",
        ge=0,
        description="Number of games removed (0 or 1)",
    )

    model_config = ConfigDict(populate_by_name=True)


# ══════════════════════════════════════════════════════════════════════════
# Error Response Models
# ══════════════════════════════════════════════════════════════════════════


class FieldError(BaseModel):
    """One entry of the `errors` map in a validation failure."""
    message: str = Field(description="e.g. Path 'title' is required.")
    kind: str = Field(default="required")
    path: str = Field(description="Name of the offending field")
    name: str = Field(default="ValidatorError")


class ValidationErrorResponse(BaseModel):
    """
    What:  Body of every 422 returned by create/update.
    Example:
        {
            "name": "ValidationError",
            "message": "Game validation failed: genre: Path 'genre' is required.",
            "errors": {"genre": {"message": "Path 'genre' is required.", ...}}
        }
    """
    name: str = Field(default="ValidationError")
    message: str = Field(description="Summary of every failed field")
    errors: dict[str, FieldError] = Field(description="Per-field errors keyed by field name")


class ErrorResponse(BaseModel):
    """
    What:  Error format for 404 and 500 responses.

    Fields:
        error: Machine-readable error code (e.g., "not_found", "server_error")
        message: Human-readable description
        request_id: Correlation ID for tracing this error in server logs
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """
    What:  Health check response showing service and database status.
    Who:   Returned by GET /health for monitoring and load balancer health checks.
    """
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
