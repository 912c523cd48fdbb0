from app.services.slack.client import SlackClient, slack_client

__all__ = ["SlackClient", "slack_client"]
