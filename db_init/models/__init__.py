from db_init.models.seed_record import SEED_RECORDS, DatabaseCredentials, SeedRecord

__all__ = ["SEED_RECORDS", "DatabaseCredentials", "SeedRecord"]
