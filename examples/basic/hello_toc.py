"""Table of contents in 3 lines."""

from marktoc import TableOfContents

toc = TableOfContents("# Heading\n\n## Subheading\n\n## Subheading with `code`\n")
print(toc.to_list_markup(), end="")
