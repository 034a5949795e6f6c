"""
case_data.py
============
All narrative content for the mansion case.

Centralising story data here means you can swap out the entire mystery
(rooms, clues, suspects) without touching any structure, engine, or UI logic.

Mansion topology:

                     [Hall de Entrada]
                       /          \\
           [Biblioteca]            [Cozinha]
              /     \\                   \\
     [Sala de Estudo] [Jardim]          [Sótão]

To create a new case:
    1. Replace MANSION_LAYOUT below (or pass --layout with a JSON file of
       the same shape to the CLI).
    2. Keep every clue in CLUE_SUSPECTS identical to the text on its room,
       since the Suspect Index matches clue text exactly.
"""

from __future__ import annotations

from typing import List, Tuple

from models import MansionLayout


# ---------------------------------------------------------------------------
# Clue → suspect associations
# ---------------------------------------------------------------------------

CLUE_SUSPECTS: List[Tuple[str, str]] = [
    ("Pegadas de lama recentes",                    "Jardineiro"),
    ("Chave antiga caída entre as flores",          "Jardineiro"),
    ("Página arrancada de um diário",               "Governanta"),
    ("Copo quebrado com marca de batom",            "Governanta"),
    ("Envelope selado com cera vermelha",           "Mordomo"),
    ("Retrato rasgado de uma mulher desconhecida",  "Mordomo"),
]
"""
Fixed clue → suspect pairs loaded into the Suspect Index at startup.

Each suspect is pointed at by exactly two clues, so collecting both is what
it takes for a CONFIRMED accusation.
"""


# ---------------------------------------------------------------------------
# Mansion layout
# ---------------------------------------------------------------------------

MANSION_LAYOUT: MansionLayout = MansionLayout.model_validate({
    "root": "Hall de Entrada",
    "rooms": [
        {
            "name":  "Hall de Entrada",
            "clue":  "Pegadas de lama recentes",
            "left":  "Biblioteca",
            "right": "Cozinha",
        },
        {
            "name":  "Biblioteca",
            "clue":  "Página arrancada de um diário",
            "left":  "Sala de Estudo",
            "right": "Jardim",
        },
        {
            "name":  "Cozinha",
            "clue":  "Copo quebrado com marca de batom",
            "right": "Sótão",
        },
        {"name": "Sala de Estudo", "clue": "Envelope selado com cera vermelha"},
        {"name": "Jardim",         "clue": "Chave antiga caída entre as flores"},
        {"name": "Sótão",          "clue": "Retrato rasgado de uma mulher desconhecida"},
    ],
    "associations": [
        {"clue": clue, "suspect": suspect} for clue, suspect in CLUE_SUSPECTS
    ],
})
"""
The six-room mansion every session explores unless a layout file is given.
Validated through MansionLayout at import time, so a broken edit here fails
immediately rather than mid-game.
"""
