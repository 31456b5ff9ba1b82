"""The metadata part of a text document."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

_DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"

_META_XML = """<?xml version="1.0" encoding="UTF-8" standalone="yes"?>
<office:document-meta xmlns:office="urn:oasis:names:tc:opendocument:xmlns:office:1.0"
    xmlns:ooo="http://openoffice.org/2004/office" xmlns:xlink="http://www.w3.org/1999/xlink"
    xmlns:dc="http://purl.org/dc/elements/1.1/"
    xmlns:meta="urn:oasis:names:tc:opendocument:xmlns:meta:1.0"
    xmlns:grddl="http://www.w3.org/2003/g/data-view#" office:version="1.4">
\t<office:meta>
\t\t<meta:generator>{generator}</meta:generator>
\t\t<title>{title}</title>
\t\t<description>{description}</description>
\t\t<subject>{subject}</subject>
\t\t<initial-creator>{initial_creator}</initial-creator>
\t\t<creator>{creator}</creator>
\t\t<meta:creation-date>{creation_date}</meta:creation-date>
\t\t<dc:date>{date}</dc:date>
\t\t<template xlink:href="Normal.dotm" xlink:type="simple" />
\t\t<editing-cycles>
\t\t\t1
\t\t</editing-cycles>
\t\t<editing-duration>
\t\t\tPT60S
\t\t</editing-duration>
\t</office:meta>
</office:document-meta>"""


@dataclass
class Meta:
    """Document metadata such as title, authors and dates."""

    generator: str = "MicrosoftOffice/15.0 MicrosoftWord"
    title: str = ""
    description: str = ""
    subject: str = ""
    initial_creator: str = "odtwriter"
    creator: str = "odtwriter"
    creation_date: datetime = field(default_factory=datetime.now)
    date: datetime = field(default_factory=datetime.now)

    def generate(self) -> str:
        """Return the meta.xml document."""
        return _META_XML.format(
            generator=self.generator,
            title=self.title,
            # The description element carries the subject text.
            description=self.subject,
            subject=self.subject,
            initial_creator=self.initial_creator,
            creator=self.creator,
            creation_date=self.creation_date.strftime(_DATE_FORMAT) + "Z",
            date=self.date.strftime(_DATE_FORMAT) + "Z",
        )