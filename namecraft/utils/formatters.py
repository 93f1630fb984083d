# namecraft/utils/formatters.py
from typing import List
from ..models.category import Category

def format_category_tree(forest: List[Category], indent: int = 0) -> str:
    """Indented listing of the category forest"""
    lines = []
    for category in forest:
        name = category.name or "(unnamed)"
        lines.append(f"{'  ' * indent}- {name} [{category.id}]")
        if category.subcategories:
            lines.append(format_category_tree(category.subcategories, indent + 1))
    return "\n".join(lines)

def format_names(names: List[str]) -> str:
    """Numbered list of generated names"""
    return "\n".join(f"{index}. {name}" for index, name in enumerate(names, start=1))

def parse_names(text: str) -> List[str]:
    """One name per line, surrounding whitespace and blank lines removed"""
    return [line.strip() for line in text.splitlines() if line.strip()]
