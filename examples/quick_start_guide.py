#!/usr/bin/env python3
"""
Quick Start Guide for the Simple XML Builder.

Builds a small document, a page skeleton and a report using nested blocks,
then prints the rendered text.
"""

from simple_xml_builder import XMLTreeBuilder, build_string


def document_example() -> str:
    """Attributes, scalar content and self-closing elements."""

    def next_meeting(xml):
        xml.agenda("Nothing of importance will be decided.")
        xml.clearance({"level": "classified"})

    def document(xml):
        xml.description("This is an example of using the builder.")
        xml.next_meeting({"date": "2022-12-28 07:47:15 -0300"}, next_meeting)

    return build_string(
        lambda xml: xml.document({"type": "xml", "use": "example"}, document)
    )


def page_example() -> str:
    """Deeper nesting, and a block that returns its text instead of calling tags."""

    def head(xml):
        xml.title("Just a moment...")
        xml.link({"href": "/cdn-cgi/styles/challenges.css", "rel": "stylesheet"})

    def main_content(xml):
        xml.h1({"class": "zone-name-title h1"},
               lambda xml: xml.img({"class": "heading-favicon", "src": "/favicon.ico"}))
        xml.h2({"class": "h2", "id": "challenge-running"},
               lambda xml: "Checking if the site connection is secure")

    def body(xml):
        xml.div({"class": "main-wrapper", "role": "main"})
        xml.div({"class": "main-content"}, main_content)

    def html(xml):
        xml.head(head)
        xml.body({"class": "no-js"}, body)

    return build_string(lambda xml: xml.html({"lang": "en-US"}, html))


def report_example() -> str:
    """Reusing one builder and escaping a reserved word."""

    def report(xml):
        xml.name("Annual Report")
        xml.class_("Class of 94")
        for month, (expenses, revenue) in enumerate([(812, 259), (898, 534)], start=1):
            xml.amounts({"month": month},
                        lambda xml: (xml.expenses(expenses), xml.revenue(lambda xml: revenue)))

    builder = XMLTreeBuilder()
    builder.build(lambda xml: xml.report(report))
    return builder.render()


if __name__ == "__main__":
    for example in (document_example, page_example, report_example):
        print(example())
        print()
