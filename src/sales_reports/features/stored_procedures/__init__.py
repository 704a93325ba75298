"""Named-query comparison endpoints

Each endpoint runs one versioned SQL definition from `queries.py` and
reports how long the database round trip took, next to a label saying which
variant ran and a note on the technique it demonstrates. The definitions come
in unoptimized/optimized pairs so the timings can be compared side by side.

The optimized product sales query expects the index created by
`service.ensure_supporting_indexes` (also available as the
`sales-reports create-indexes` command)."""
