"""Google Sheets destination with a lazily-built Sheets v4 service.

A single SheetsDestination is constructed at startup from settings and
injected into the request pipeline. The googleapiclient service is built on
first append from service-account credentials; its calls are blocking, so
append runs them in a worker thread.
"""

import asyncio
import logging

from google.oauth2 import service_account
from googleapiclient.discovery import build

from flyer_events.config import Settings

logger = logging.getLogger(__name__)

SHEETS_SCOPES = ["https://www.googleapis.com/auth/spreadsheets"]
_TOKEN_URI = "https://oauth2.googleapis.com/token"


def build_sheets_service(service_account_email: str, private_key: str):
    """Build a Sheets v4 service authenticated as the given service account.

    The private key is usually stored in env with escaped newlines ("\\n");
    they are unescaped before the key is loaded.
    """
    credentials = service_account.Credentials.from_service_account_info(
        {
            "type": "service_account",
            "client_email": service_account_email,
            "private_key": private_key.replace("\\n", "\n"),
            "token_uri": _TOKEN_URI,
        },
        scopes=SHEETS_SCOPES,
    )
    return build("sheets", "v4", credentials=credentials, cache_discovery=False)


class SheetsDestination:
    """Append-only handle on one spreadsheet range."""

    def __init__(
        self,
        spreadsheet_id: str,
        sheet_range: str = "A:J",
        service_account_email: str = "",
        private_key: str = "",
        service=None,
    ) -> None:
        self.spreadsheet_id = spreadsheet_id
        self.sheet_range = sheet_range
        self._service_account_email = service_account_email
        self._private_key = private_key
        self._service = service

    @classmethod
    def from_settings(cls, settings: Settings) -> "SheetsDestination":
        return cls(
            spreadsheet_id=settings.google_spreadsheet_id,
            sheet_range=settings.sheet_range,
            service_account_email=settings.google_service_account_email,
            private_key=settings.google_private_key,
        )

    @property
    def is_configured(self) -> bool:
        return bool(self.spreadsheet_id)

    @property
    def service(self):
        """Return the cached Sheets service, building it on first use."""
        if self._service is None:
            self._service = build_sheets_service(
                self._service_account_email, self._private_key
            )
        return self._service

    def _append_sync(self, rows: list[list[str]]) -> dict:
        return (
            self.service.spreadsheets()
            .values()
            .append(
                spreadsheetId=self.spreadsheet_id,
                range=self.sheet_range,
                valueInputOption="USER_ENTERED",
                body={"values": rows},
            )
            .execute()
        )

    async def append(self, rows: list[list[str]]) -> str | None:
        """Append rows in one request and return the updated range.

        Lets googleapiclient.errors.HttpError and credential errors propagate.
        """
        result = await asyncio.to_thread(self._append_sync, rows)
        return result.get("updates", {}).get("updatedRange")
