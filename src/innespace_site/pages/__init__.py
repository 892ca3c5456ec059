"""Server-rendered pages.

- landing page per locale, rendered from one Jinja2 template
- portfolio page built from the bundled JSON content
- no client-side framework; the language switcher is plain links
"""
