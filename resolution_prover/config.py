from pydantic import BaseModel, ConfigDict, Field


class ResolutionConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    fallback_to_premises: bool = Field(
        default=True,
        description="when no negated-goal clause starts a refutation, continue the search from the premise clauses"
    )
    reuse_derived_clauses: bool = Field(
        default=True,
        description="let the current clause resolve against clauses derived earlier in the search, not only input clauses"
    )
    discard_tautologies: bool = Field(
        default=True,
        description="keep clauses holding both polarities of a name out of the search"
    )
