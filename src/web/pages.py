"""Static instructional pages served by the web app."""

SECTIONS: list[tuple[str, str]] = [
    ("/grammar", "Grammar"),
    ("/reading", "Reading"),
    ("/listening", "Listening"),
    ("/writing", "Writing"),
    ("/characters", "Characters"),
    ("/pinyin", "Pinyin"),
    ("/tutor", "AI Tutor"),
]

# Sections without interactive content yet; path -> plain text body
PLACEHOLDERS: dict[str, str] = {
    "/grammar": "Grammar section placeholder",
    "/reading": "Reading section placeholder",
    "/listening": "Listening section placeholder",
    "/characters": "Characters writing section placeholder",
    "/pinyin": "Pinyin section placeholder",
}


def _page(title: str, body: str) -> str:
    return (
        "<!DOCTYPE html>\n"
        '<html lang="en">\n'
        f'<head><meta charset="UTF-8"><title>{title}</title></head>\n'
        f"<body>\n{body}\n</body></html>"
    )


def index_page() -> str:
    items = "\n".join(f'<li><a href="{path}">{label}</a></li>' for path, label in SECTIONS)
    return _page("Chinese Learning", f"<h1>Chinese Learning</h1>\n<ul>\n{items}\n</ul>")


WRITING_FORM = _page(
    "Writing",
    '<form method="POST" action="/writing">\n'
    '<textarea name="text" rows="4" cols="50"></textarea><br/>\n'
    '<button type="submit">Submit</button>\n'
    "</form>",
)

TUTOR_FORM = _page(
    "Tutor",
    '<form method="POST" action="/tutor">\n'
    '<input type="text" name="question" style="width:300px"/><br/>\n'
    '<button type="submit">Ask</button>\n'
    "</form>",
)
