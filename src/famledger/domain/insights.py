"""AI spending insights.

The model only ever sees the transactions passed in; its answer is free
text shown as-is. Any failure talking to the model is turned into a fixed
fallback message, so callers never have to handle an error here.
"""

import logging
import os
from typing import Any, Optional, Sequence

from famledger.domain.entities import Transaction, TransactionType

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "gemini-2.5-flash"

EMPTY_MESSAGE = "Add some transactions to receive a financial analysis."
NO_TEXT_MESSAGE = "Could not generate insights right now."
FALLBACK_MESSAGE = (
    "Something went wrong while contacting the AI service. "
    "Check your connection or API key and try again later."
)

PROMPT_TEMPLATE = """Act as an experienced personal finance advisor.
Analyse the following financial transactions for {month} and write a short,
direct executive summary (at most 3 paragraphs).

Data:
{summary}

Guidelines:
1. Identify the category with the highest spending.
2. Point out whether the family is spending more than it earns (if there is income data).
3. Give one practical, actionable tip to save money next month based on the spending patterns.
4. Use Markdown formatting (bold, lists) for readability.
5. Be encouraging but realistic."""


def format_transaction_line(txn: Transaction) -> str:
    """Render one transaction as a prompt line."""
    kind = "Income" if txn.type == TransactionType.INCOME else "Expense"
    return (
        f"- {txn.date}: {txn.description} ({txn.category}) - "
        f"R$ {txn.amount:.2f} ({kind})"
    )


def build_prompt(transactions: Sequence[Transaction], month_label: str) -> str:
    summary = "\n".join(format_transaction_line(txn) for txn in transactions)
    return PROMPT_TEMPLATE.format(month=month_label, summary=summary)


class InsightService:
    """Generate a natural-language summary of a month's spending."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        model_name: Optional[str] = None,
        model: Any = None,
    ):
        """Initialize insight service.

        Args:
            api_key: Gemini API key. If None, checks GEMINI_API_KEY environment variable
            model_name: Gemini model name. If None, checks GEMINI_MODEL, then
                defaults to gemini-2.5-flash
            model: Pre-built model object exposing ``generate_content``; skips
                client configuration when given
        """
        self.api_key = api_key or os.environ.get("GEMINI_API_KEY")
        self.model_name = model_name or os.environ.get("GEMINI_MODEL") or DEFAULT_MODEL
        self._model = model

    def _get_model(self):
        """Configure Google Generative AI on first use."""
        if self._model is None:
            if not self.api_key:
                raise RuntimeError("GEMINI_API_KEY is not set")
            import google.generativeai as genai

            genai.configure(api_key=self.api_key)
            self._model = genai.GenerativeModel(model_name=self.model_name)
        return self._model

    def generate_insights(self, transactions: Sequence[Transaction], month_label: str) -> str:
        """Summarize spending patterns for one month.

        Args:
            transactions: The month's transactions
            month_label: Human month label used in the prompt, e.g. "March 2024"

        Returns:
            Markdown text from the model, or a fixed message when there is
            nothing to analyse or the model call fails
        """
        if not transactions:
            return EMPTY_MESSAGE

        prompt = build_prompt(transactions, month_label)
        try:
            response = self._get_model().generate_content(prompt)
            text = (response.text or "").strip()
        except Exception:
            logger.exception("Failed to generate insights for %s", month_label)
            return FALLBACK_MESSAGE

        return text or NO_TEXT_MESSAGE
