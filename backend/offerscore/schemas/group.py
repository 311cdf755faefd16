from datetime import date
from typing import Literal

from pydantic import BaseModel


class Person(BaseModel):
    name: str
    birth_date: date
    gender: str | None = None
    type: Literal["adult", "child"] = "adult"


class TravelGroup(BaseModel):
    id: int | None = None
    name: str = ""
    people: list[Person] = []
    ai_instructions: str | None = None  # free-text preferences, keyword matched
