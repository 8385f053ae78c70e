from enum import Enum


class Frequency(str, Enum):
    MONTHLY = "monthly"
    QUARTERLY = "quarterly"
    SEMI_ANNUALLY = "semi-annually"
    YEARLY = "yearly"
    ONE_TIME = "one-time"


# Legacy German frequency labels still present in older historical rows.
LEGACY_FREQUENCY_ALIASES = {
    "monatlich": Frequency.MONTHLY,
    "quartalsweise": Frequency.QUARTERLY,
    "halbjährlich": Frequency.SEMI_ANNUALLY,
    "jährlich": Frequency.YEARLY,
    "einmalig": Frequency.ONE_TIME,
}
