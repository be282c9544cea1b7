from sqlalchemy.sql.elements import ColumnElement


def _escape_like(text: str) -> str:
    return text.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def contains_ignore_case(column, text: str) -> ColumnElement:
    # Sous-chaîne littérale, insensible à la casse (pas de regex)
    search_pattern = f"%{_escape_like(text)}%"
    return column.ilike(search_pattern, escape="\\")
