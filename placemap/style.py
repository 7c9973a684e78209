import html


def popup_html(place_name):
    return f"<strong>{html.escape(str(place_name))}</strong>"
