import csv
from pathlib import Path

import click
import pandas as pd

from .client import ClientSettings, TeamsClient


def create_users(filename: Path, remaining_teams: int | None, client: TeamsClient):
    df = pd.read_csv(filename)
    existing_emails = {user.email for user in client.get_users()}
    users_created = []
    for _, row in df.iterrows():
        email = row["Email"]
        if email in existing_emails:
            print(f"User {email} already exists")
            continue
        name = row["Name"] if "Name" in row and not pd.isna(row["Name"]) else None
        created = client.create_user(email, name=name, remaining_teams=remaining_teams)
        users_created.append({"email": email, "user_id": str(created.user.id), "api_key": created.key})
    result_path = filename.parent / "created" / f"{filename.stem}-created.csv"
    result_path.parent.mkdir(parents=True, exist_ok=True)
    with open(result_path, "w") as f:
        writer = csv.DictWriter(f, fieldnames=["email", "user_id", "api_key"])
        writer.writeheader()
        writer.writerows(users_created)
    return users_created


@click.command()
@click.option("--file_path", help="CSV file with an 'Email' and an optional 'Name' column", type=Path)
@click.option("--remaining_teams", help="How many teams each user can create", type=int, default=None)
@click.option("--env_file", help=".env file to use", default=".env.admin", type=str)
def cli(file_path: Path, remaining_teams: int | None, env_file: str):
    create_users(file_path, remaining_teams, TeamsClient(ClientSettings(_env_file=env_file)))


if __name__ == "__main__":
    cli()
