from fastapi import Path

date_path_param = Path(..., description="Calendar date in YYYY-MM-DD format.")
name_path_param = Path(..., description="Entry name, unique within the date's collection.")
