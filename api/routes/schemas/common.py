from __future__ import annotations
from datetime import datetime
from typing import Annotated

from pydantic import AfterValidator

from core.dates import as_utc

# SQLite hands timestamps back without an offset; they are UTC
UtcDatetime = Annotated[datetime, AfterValidator(as_utc)]
