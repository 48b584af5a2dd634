"""Training plan ingestion: plan documents to structured workouts."""
