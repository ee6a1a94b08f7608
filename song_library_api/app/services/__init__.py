"""
Service layer.

``song_query`` holds the pure SQL builders and the verse paginator;
``song_service`` runs those statements against the database.
"""
