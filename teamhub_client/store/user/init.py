init = {
    "user": None,
    "teams": [],
    "active_team": None,
    "team_types": [],
    "errors": {},
}
