"""
data/ — Bundled venue-ranking tables for VenueRank.

Files:
  journal_rankings.json    — SCImago Journal Rank: title → {"quartile": "Q1".."Q4", "sjr": score}
  conference_rankings.json — CORE conference ranks: title → {"rank": "A*".."C", "acronym": "ABC"}

The bundled files are small samples; point VENUERANK_DATA_DIR (or --data-dir)
at full tables generated from the SCImago / CORE CSV exports.
"""
