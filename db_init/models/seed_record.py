"""
Seed record and database credential schemas.

SeedRecord mirrors one row of the Employee table (without the generated ID).
DatabaseCredentials is the JSON shape stored in the Secrets Manager secret.

Dependencies: pydantic
System role: Validated data shapes for the seeder
"""

from pydantic import BaseModel, ConfigDict, Field


class SeedRecord(BaseModel):
    """One Employee row to be inserted. ID is assigned by the database."""

    model_config = ConfigDict(frozen=True)

    first_name: str = Field(max_length=50)
    last_name: str = Field(max_length=50)
    zip: str = Field(max_length=10, description="Postal code")
    country: str = Field(max_length=50)
    salary: int

    def to_row(self) -> dict[str, str | int]:
        """Map to Employee column names."""
        return {
            "firstname": self.first_name,
            "lastname": self.last_name,
            "zip": self.zip,
            "country": self.country,
            "salary": self.salary,
        }

    @property
    def natural_key(self) -> tuple[str, str, str]:
        """Identity used when skipping rows that already exist."""
        return (self.first_name, self.last_name, self.zip)


class DatabaseCredentials(BaseModel):
    """
    Credential bundle read from Secrets Manager.

    RDS-managed secrets also carry engine/host/port keys; those are ignored.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    username: str = Field(min_length=1)
    password: str = Field(min_length=1, repr=False)
    dbname: str = Field(min_length=1)


SEED_RECORDS: tuple[SeedRecord, ...] = (
    SeedRecord(first_name="John", last_name="Doe", zip="12345", country="USA", salary=50000),
    SeedRecord(first_name="Jane", last_name="Smith", zip="54321", country="USA", salary=60000),
    SeedRecord(first_name="Alice", last_name="Johnson", zip="67890", country="Canada", salary=70000),
)
