from teamhub.config import settings

api_description = f"""
Manage the teams you are part of.

### Authentication
All endpoints except the list of team types require an API key, sent in the `X-API-Key` header. API keys are
issued by the administrators of {settings.base_url}.

### Responses
The team endpoints always answer with a JSON object with a boolean `success` field. When `success` is `false`,
the `message` field explains why the request was refused:

- `max-teams-created`: you already created as many teams as you are allowed to.
- `member-not-allowed`: only the leader of a team can update it.
- `already-a-member`: you already joined this team.
- `not-a-member`: you are not a member of this team.
- `you-are-last-member`: the last member of a team cannot leave it.
"""


tags_metadata = [
    {
        "name": "teams",
        "description": "Create, update, join and leave teams, and list the available team types.",
    },
    {
        "name": "users",
        "description": "Information about the current user. User management is restricted to administrators.",
    },
]
