from __future__ import annotations

from sports_hub.core.catalog import DEFAULT_LEAGUE_ID

TEAMS: dict[str, tuple[str, ...]] = {
    "39": (
        "Liverpool", "Arsenal", "Manchester City", "Chelsea", "Aston Villa",
        "Tottenham", "Newcastle", "Manchester United", "West Ham", "Brighton",
        "Bournemouth", "Fulham", "Wolves", "Everton", "Brentford",
        "Nottingham Forest", "Luton", "Burnley", "Sheffield United", "Crystal Palace",
    ),
    "135": (
        "Inter Milan", "Juventus", "AC Milan", "Atalanta", "Bologna",
        "Roma", "Napoli", "Lazio", "Fiorentina", "Torino",
        "Monza", "Genoa", "Verona", "Lecce", "Udinese",
        "Cagliari", "Empoli", "Frosinone", "Sassuolo", "Salernitana",
    ),
    "61": (
        "Paris Saint-Germain", "Monaco", "Brest", "Lille", "Nice",
        "Lens", "Marseille", "Rennes", "Lyon", "Reims",
        "Montpellier", "Strasbourg", "Nantes", "Le Havre", "Toulouse",
        "Metz", "Lorient", "Clermont", "Ajaccio",
    ),
    "78": (
        "Bayer Leverkusen", "Bayern Munich", "VfB Stuttgart", "RB Leipzig", "Borussia Dortmund",
        "Eintracht Frankfurt", "Hoffenheim", "Freiburg", "Augsburg", "Werder Bremen",
        "Wolfsburg", "Mainz", "Heidenheim", "Borussia Monchengladbach", "Union Berlin",
        "Bochum", "FC Koln", "Darmstadt",
    ),
}  # fmt: skip

# (name, team, stat)
SCORERS: dict[str, tuple[tuple[str, str, int], ...]] = {
    "39": (
        ("E. Haaland", "Man City", 22),
        ("Igor Thiago", "Brentford", 17),
        ("A. Semenyo", "Bournemouth", 13),
        ("João Pedro", "Chelsea", 10),
        ("H. Ekitike", "Liverpool", 10),
    ),
    "135": (
        ("Marcus Thuram", "Inter", 13),
        ("Lautaro Martínez", "Inter", 12),
        ("Mateo Retegui", "Atalanta", 12),
        ("Dusan Vlahovic", "Juventus", 10),
        ("Ademola Lookman", "Atalanta", 9),
    ),
    "61": (
        ("Bradley Barcola", "PSG", 11),
        ("Jonathan David", "Lille", 11),
        ("Mason Greenwood", "Marseille", 10),
        ("Alexandre Lacazette", "Lyon", 9),
        ("Ousmane Dembélé", "PSG", 8),
    ),
    "78": (
        ("Harry Kane", "Bayern", 21),
        ("Omar Marmoush", "Frankfurt", 15),
        ("Florian Wirtz", "Leverkusen", 12),
        ("Tim Kleindienst", "Gladbach", 10),
        ("Jonathan Burkardt", "Mainz", 10),
    ),
}

ASSISTS: dict[str, tuple[tuple[str, str, int], ...]] = {
    "39": (
        ("Bruno Fernandes", "Man Utd", 12),
        ("R. Cherki", "Man City", 7),
        ("E. Haaland", "Man City", 6),
    ),
    "135": (
        ("Ademola Lookman", "Atalanta", 8),
        ("Nicolò Barella", "Inter", 7),
        ("Hakan Çalhanoğlu", "Inter", 6),
    ),
    "61": (
        ("Ousmane Dembélé", "PSG", 10),
        ("Bradley Barcola", "PSG", 8),
        ("Vitinha", "PSG", 7),
    ),
    "78": (
        ("Harry Kane", "Bayern", 12),
        ("Florian Wirtz", "Leverkusen", 9),
        ("Joshua Kimmich", "Bayern", 8),
    ),
}


def teams_for(league_id: str) -> tuple[str, ...]:
    return TEAMS.get(league_id, TEAMS[DEFAULT_LEAGUE_ID])
