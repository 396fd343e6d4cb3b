from pydantic import BaseModel, Field, computed_field

from slugger.services.slug import SlugPolicy


class UniquenessReport(BaseModel):
    policy: SlugPolicy
    iterations: int = Field(ge=1)
    length: int = Field(ge=1)
    unique_count: int
    duplicates: list[str] = []
    wrong_length: list[str] = []
    samples: list[str] = []

    @computed_field
    @property
    def passed(self) -> bool:
        return not self.duplicates and not self.wrong_length
