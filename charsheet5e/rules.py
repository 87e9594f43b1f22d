"""Core 5th-edition rule calculations."""


def proficiency_bonus_for(level: int) -> int:
    """Return the proficiency bonus for a total character level."""
    return -(-level // 4) + 1


def modifier(score: int, proficiency: bool, expertise: bool, proficiency_bonus: int) -> int:
    """Return the modifier for an ability score.

    Proficiency adds the proficiency bonus once; with expertise it is added twice.
    Expertise without proficiency adds nothing.
    """
    bonus = 0
    if proficiency:
        bonus = proficiency_bonus * 2 if expertise else proficiency_bonus
    return (score - 10) // 2 + bonus