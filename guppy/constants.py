"""Shared colour table.

Each hue maps shade -> hex value, the same scale the dashboard styles use.
"""

from __future__ import annotations

COLORS: dict[str, str | dict[int, str]] = {
    "white": "#FFFFFF",
    "black": "#000000",
    "hotPink": {300: "#FF6BCD", 500: "#FF1FB3", 700: "#E3008F"},
    "pink": {300: "#F9A8D4", 500: "#EC4899", 700: "#BE185D"},
    "red": {300: "#FF8A8A", 500: "#FF2E2E", 700: "#D10000"},
    "orange": {300: "#FFC266", 500: "#FF9500", 700: "#E06900"},
    "green": {300: "#8CE0A4", 500: "#2BC45A", 700: "#0F9B3A"},
    "teal": {300: "#7DE3DA", 500: "#14B8A6", 700: "#0F766E"},
    "blue": {300: "#93C5FD", 500: "#3B82F6", 700: "#1D4ED8", 900: "#0B1B3F"},
    "violet": {300: "#C4B5FD", 500: "#8B5CF6", 700: "#6D28D9"},
    "purple": {300: "#D8B4FE", 500: "#A855F7", 700: "#7E22CE"},
}
