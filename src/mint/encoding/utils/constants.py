"""Shared constants for the Sqids codec and its configuration layer."""
from __future__ import annotations

from pathlib import Path

SCHEMA_JSON_PATH = Path(__file__).resolve().parents[1] / "data" / "schema.json"
CONFIG_SECTION = "sqid"

DEFAULT_ALPHABET = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789"
DEFAULT_MIN_LENGTH = 0
MIN_ALPHABET_LENGTH = 3
MIN_LENGTH_LIMIT = 255
MIN_BLOCKLIST_WORD_LENGTH = 3

# Applied to blocklist words longer than three characters.
LEET_SUBSTITUTIONS = {
    "i": "1",
    "o": "0",
    "l": "1",
}

GENERATOR_NAME = "sqid"
GENERATE_COUNTER_WRAP = 1_000

DEFAULT_BLOCKLIST = frozenset(
    {
        "aand",
        "ahole",
        "allupato",
        "anal",
        "anale",
        "anus",
        "arrapato",
        "arsch",
        "arse",
        "ass",
        "balatkar",
        "bastardo",
        "battona",
        "bitch",
        "bite",
        "bitte",
        "boceta",
        "boiata",
        "boob",
        "boobe",
        "bosta",
        "branlage",
        "branler",
        "branlette",
        "branleur",
        "branleuse",
        "cabrao",
        "cabron",
        "caca",
        "cacca",
        "cacete",
        "cagante",
        "cagar",
        "cagare",
        "cagna",
        "caraculo",
        "caralho",
        "cazzata",
        "cazzimma",
        "cazzo",
        "chatte",
        "chiasse",
        "chiavata",
        "chier",
        "chingadazos",
        "chingaderita",
        "chingar",
        "chingo",
        "chingues",
        "chink",
        "chod",
        "chootia",
        "chootiya",
        "clit",
        "clito",
        "cock",
        "coglione",
        "cona",
        "connard",
        "connasse",
        "conne",
        "couilles",
        "cracker",
        "crap",
        "culattone",
        "culero",
        "culo",
        "cum",
        "cunt",
        "damn",
        "deich",
        "depp",
        "dick",
        "dildo",
        "dyke",
        "encule",
        "enema",
        "enfoire",
        "estupido",
        "etron",
        "fag",
        "fica",
        "ficker",
        "figa",
        "foda",
        "foder",
        "fottere",
        "fottersi",
        "fotze",
        "foutre",
        "frocio",
        "froscio",
        "fuck",
        "gandu",
        "goo",
        "gouine",
        "grognasse",
        "harami",
        "haramzade",
        "hundin",
        "idiot",
        "imbecile",
        "jerk",
        "jizz",
        "kamine",
        "kike",
        "leccaculo",
        "mamahuevo",
        "mamon",
        "masturbate",
        "masturbation",
        "merda",
        "merde",
        "merdoso",
        "mierda",
        "mignotta",
        "minchia",
        "mist",
        "muschi",
        "neger",
        "negre",
        "negro",
        "nerchia",
        "nigger",
        "orgasm",
        "palle",
        "paneleiro",
        "patakha",
        "pecorina",
        "pendejo",
        "penis",
        "pipi",
        "pirla",
        "piscio",
        "pisser",
        "polla",
        "pompino",
        "poop",
        "porca",
        "porn",
        "porra",
        "pouffiasse",
        "prick",
        "pussy",
        "puta",
        "putain",
        "pute",
        "putiza",
        "puttana",
        "queca",
        "randi",
        "rape",
        "recchione",
        "retard",
        "rompiballe",
        "ruffiano",
        "sacanagem",
        "salaud",
        "salope",
        "saugnapf",
        "sbattere",
        "sbattersi",
        "sborra",
        "sborrone",
        "scheise",
        "scheisse",
        "schlampe",
        "schwachsinnig",
        "schwanz",
        "scopare",
        "scopata",
        "sexy",
        "shit",
        "slut",
        "spompinare",
        "stronza",
        "stronzo",
        "stupid",
        "succhiami",
        "sucker",
        "tapette",
        "testicle",
        "tette",
        "topa",
        "tringler",
        "troia",
        "trombare",
        "turd",
        "twat",
        "vaffanculo",
        "vagina",
        "verdammt",
        "verga",
        "wank",
        "wichsen",
        "xana",
        "xochota",
        "zizi",
        "zoccola",
    }
)
