from pydantic import BaseModel, ConfigDict


class CodeSample(BaseModel):
    """One source file with its provenance, emitted as a single JSONL record."""

    model_config = ConfigDict(frozen=True)

    repo: str
    commit: str
    path: str
    text: str

    def to_json_line(self) -> str:
        return self.model_dump_json()
