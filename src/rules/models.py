from typing import Literal

from pydantic import BaseModel, Field, field_validator

from src.domain.keys import decode_key


class ProgramRules(BaseModel):
    program_id: str
    seed: str = "solana_business_card"

    @field_validator("program_id")
    @classmethod
    def _check_program_id(cls, value: str) -> str:
        decode_key(value)
        return value

    @field_validator("seed")
    @classmethod
    def _check_seed(cls, value: str) -> str:
        if not 0 < len(value.encode("utf-8")) <= 32:
            raise ValueError("seed must be between 1 and 32 bytes")
        return value

    @property
    def program_id_bytes(self) -> bytes:
        return decode_key(self.program_id)

    @property
    def seed_bytes(self) -> bytes:
        return self.seed.encode("utf-8")

class RentRules(BaseModel):
    lamports_per_byte_year: int = Field(default=3480, ge=0)
    exemption_threshold: float = Field(default=2.0, ge=0)
    account_storage_overhead: int = Field(default=128, ge=0)

    def minimum_balance(self, data_len: int) -> int:
        """Lamports an account of `data_len` bytes must hold to be rent exempt."""
        bytes_charged = self.account_storage_overhead + data_len
        return int(bytes_charged * self.lamports_per_byte_year * self.exemption_threshold)

class StorageRules(BaseModel):
    backend: Literal["memory", "sqlite"] = "memory"
    db_path: str = "data/favorites.db"
    migrations_dir: str = "migrations"

class LoggingRules(BaseModel):
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    format: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"

class Rules(BaseModel):
    program: ProgramRules
    rent: RentRules = Field(default_factory=RentRules)
    storage: StorageRules = Field(default_factory=StorageRules)
    logging: LoggingRules = Field(default_factory=LoggingRules)
