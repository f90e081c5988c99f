"""
Small HTML fixtures shaped like the SIS course and schedule pages.
"""

HEADER_ROW = (
    '<tr class="head1"><th>Kód</th><th>Typ</th><th>Název</th><th>Vyučující</th>'
    "<th>Den, čas</th><th>Místnost</th><th>Délka</th></tr>"
)


def landing_page(href: str = "/schedule?x=1", text: str = "Rozvrh") -> str:
    return (
        '<html><head><meta charset="utf-8"></head><body>'
        '<a href="index.php?do=predmet">Předměty</a>\n'
        f'<a href="{href}">{text}</a>\n'
        "</body></html>"
    )


def schedule_row(code: str, kind: str, name: str, teacher: str, day_time: str, duration: str) -> str:
    return (
        f"<tr>\n  <td>{code}</td>\n  <td>{kind}</td>\n  <td>{name}</td>\n  <td>{teacher}</td>\n"
        f"  <td>{day_time}</td>\n  <td>S3</td>\n  <td>{duration}</td>\n</tr>"
    )


def schedule_page(*rows: str, tbody: bool = True) -> str:
    body = "\n".join((HEADER_ROW,) + rows)
    if tbody:
        body = f"<tbody>{body}</tbody>"
    return f'<html><head><meta charset="utf-8"></head><body><div><table id="table1">{body}</table></div></body></html>'


def error_page() -> str:
    return '<html><head><meta charset="utf-8"></head><body><p class="error">Rozvrh nenalezen.</p></body></html>'
