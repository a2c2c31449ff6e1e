"""Build tables of contents for 1000 docs in parallel.

Each construction gets its own anchor registry, so duplicate numbering in one
document never leaks into another.
"""

from concurrent.futures import ThreadPoolExecutor

from marktoc import TableOfContents

docs = [f"# Doc {i}\n\n## Usage\n\n## Usage\n" for i in range(1000)]

with ThreadPoolExecutor(max_workers=8) as ex:
    results = list(ex.map(TableOfContents, docs))

print(f"Built {len(results)} tables of contents")
print(results[-1].to_list_markup(), end="")
