"""Pydantic models for lexiform API requests, responses and verb records."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


# ============================================================================
# Verb Records
# ============================================================================


class ReverseFieldsModel(BaseModel):
    """Reverse field names; serialized with the keys at/by/in/for."""
    model_config = ConfigDict(populate_by_name=True)

    at: str | None = Field(None, description="Timestamp field (publishedAt)")
    by: str | None = Field(None, description="Actor reference (publishedBy)")
    in_: str | None = Field(None, alias="in", description="Location/context (publishedIn)")
    for_: str | None = Field(None, alias="for", description="Purpose/target (publishedFor)")


class VerbRecord(BaseModel):
    """One entry of a known-verbs file, and the /conjugate payload."""
    action: str = Field(..., min_length=1, description="Base form (publish)")
    actor: str = Field(..., description="Who performs it (publisher)")
    act: str = Field(..., description="Present tense, 3rd person (publishes)")
    activity: str = Field(..., description="Gerund (publishing)")
    result: str = Field(..., description="Result noun (publication)")
    reverse: ReverseFieldsModel = Field(default_factory=ReverseFieldsModel)
    inverse: str | None = Field(None, description="Opposite action (unpublish)")
    description: str | None = Field(None, description="What the action does")


# ============================================================================
# Request Models
# ============================================================================


class ActionRequest(BaseModel):
    """Request body for /conjugate and /verb_fields."""
    action: str = Field(..., min_length=1, max_length=100, description="Action name, e.g. publish")


class DeriveRequest(BaseModel):
    """Request body for /derive."""
    verb: str = Field(..., min_length=1, max_length=100, description="Base verb")
    forms: list[str] | None = Field(None, description="Forms to derive (optional, default all)")


class WordRequest(BaseModel):
    """Request body for /pluralize and /singularize."""
    word: str = Field(..., min_length=1, max_length=100, description="Noun to inflect")


class TypeNameRequest(BaseModel):
    """Request body for /noun and /type_meta."""
    type_name: str = Field(..., min_length=1, max_length=200, description="Type name, e.g. BlogPost")


# ============================================================================
# Response Models
# ============================================================================


class ConjugateResponse(VerbRecord):
    """Response for /conjugate."""


class VerbFieldsResponse(BaseModel):
    """Response for /verb_fields."""
    action: str
    reverse: dict[str, str] = Field(default_factory=dict, description="Preposition -> field name")


class DeriveResponse(BaseModel):
    """Response for /derive."""
    verb: str = Field(..., description="Base verb")
    forms: dict[str, str] = Field(..., description="Form -> derived spelling")


class InflectResponse(BaseModel):
    """Response for /pluralize and /singularize."""
    word: str = Field(..., description="Input word")
    result: str = Field(..., description="Inflected word")
    rule: str = Field(..., description="Name of the rule that produced it")


class NounResponse(BaseModel):
    """Response for /noun."""
    singular: str
    plural: str
    actions: list[str]
    events: list[str]


class TypeMetaResponse(BaseModel):
    """Response for /type_meta; keys are camelCase (slugPlural, createdAt)."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    name: str = Field(..., description="Type name as given")
    singular: str
    plural: str
    slug: str
    slug_plural: str
    creator: str
    created_at: str
    created_by: str
    updated_at: str
    updated_by: str
    created: str = Field(..., description="Event name, e.g. BlogPost.created")
    updated: str
    deleted: str
    actions: list[str]
    events: list[str]
