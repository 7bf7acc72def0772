from dataclasses import dataclass, field
from typing import List

DEFAULT_YEAR = "Default Year"
DEFAULT_NOTICE = "No notice available."


@dataclass
class InitialData:
    names: List[str] = field(default_factory=list)
    meals: List[str] = field(default_factory=list)
    next_day_meals: List[str] = field(default_factory=list)
    year_name: str = DEFAULT_YEAR
    notice_text: str = DEFAULT_NOTICE

    def to_payload(self):
        return {
            'names': self.names,
            'meals': self.meals,
            'nextDayMeals': self.next_day_meals,
            'yearName': self.year_name,
            'noticeText': self.notice_text,
        }

    @classmethod
    def from_payload(cls, payload):
        return cls(names=list(payload.get('names') or []),
                   meals=list(payload.get('meals') or []),
                   next_day_meals=list(payload.get('nextDayMeals') or []),
                   year_name=payload.get('yearName') or DEFAULT_YEAR,
                   notice_text=payload.get('noticeText') or DEFAULT_NOTICE)
