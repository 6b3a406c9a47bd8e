"""Telegram front end: shorthand messages in, confirmed ledger commits out.

Flow:
- ``/auth <secret>`` authorizes the sender (the message is deleted afterwards)
- ``/accounts [query]`` lists matching accounts
- any other text from an authorized user is drafted into an entry and echoed
  back with Commit / Cancel buttons
- pressing Commit appends the entry, commits and pushes the ledger repository
"""

from __future__ import annotations

import asyncio
import datetime as dt
import os

from telegram import InlineKeyboardButton, InlineKeyboardMarkup, Message, Update
from telegram.ext import (
    Application,
    CallbackQueryHandler,
    CommandHandler,
    ContextTypes,
    MessageHandler,
    filters,
)

from beanbot.application.entries import LedgerService
from beanbot.domain import CommandError
from beanbot.ledger_reader import LedgerValidationError
from beanbot.runtime import get_logger
from beanbot.runtime.config import AppConfig
from beanbot.runtime.git_sync import GitSyncError
from beanbot.runtime.state import BotState, load_state, save_state

logger = get_logger(__name__)

CALLBACK_COMMIT = "commit"
CALLBACK_CANCEL = "cancel"
COMMITTED_MARK = "Committed ✅"
CANCELLED_MARK = "Cancelled ❌"

CONFIRM_KEYBOARD = InlineKeyboardMarkup(
    [
        [
            InlineKeyboardButton("Commit", callback_data=CALLBACK_COMMIT),
            InlineKeyboardButton("Cancel", callback_data=CALLBACK_CANCEL),
        ]
    ]
)

# Errors that are the user's to fix or the ledger repository's; reported back as text.
REPORTED_ERRORS = (CommandError, GitSyncError, LedgerValidationError, OSError)


def _service(context: ContextTypes.DEFAULT_TYPE) -> LedgerService:
    return context.bot_data["service"]


def _state(context: ContextTypes.DEFAULT_TYPE) -> BotState:
    return context.bot_data["state"]


def _config(context: ContextTypes.DEFAULT_TYPE) -> AppConfig:
    return context.bot_data["config"]


def _is_authorized(update: Update, context: ContextTypes.DEFAULT_TYPE) -> bool:
    user = update.effective_user
    return user is not None and _state(context).is_authorized(user.id)


def _is_recent(message: Message, max_age: int, now: dt.datetime | None = None) -> bool:
    now = now or dt.datetime.now(dt.timezone.utc)
    return (now - message.date).total_seconds() <= max_age


async def auth_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handler for ``/auth <secret>``."""
    user = update.effective_user
    message = update.message
    if user is None or message is None:
        return
    state = _state(context)
    config = _config(context)
    # Everything after the command word, so whitespace inside the secret is kept.
    _, _, secret = (message.text or "").partition(" ")
    if state.is_authorized(user.id) or secret != config.bot.secret:
        return

    logger.info("Authorizing user %s (@%s)", user.id, user.username or "<noname>")
    state.authorize(user.id)
    save_state(state, config.bot.state_file)
    await message.reply_text("Authorized!")
    await message.delete()


async def accounts_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handler for ``/accounts [query]``."""
    message = update.message
    if message is None or not _is_authorized(update, context):
        return
    query = " ".join(context.args or [])
    try:
        accounts = await asyncio.to_thread(_service(context).accounts, query)
    except REPORTED_ERRORS as exc:
        logger.debug("Account listing failed: %s", exc)
        await message.reply_text(str(exc))
        return
    await message.reply_text(" ".join(accounts) if accounts else "No matched account")


async def entry_message(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handler for plain text: draft an entry and ask for confirmation."""
    message = update.message
    if message is None or message.text is None or not _is_authorized(update, context):
        return
    if not _is_recent(message, _config(context).bot.max_message_age):
        logger.debug("Ignoring stale message %s", message.message_id)
        return

    try:
        draft = await asyncio.to_thread(_service(context).draft, message.text)
    except REPORTED_ERRORS as exc:
        logger.debug("Drafting failed: %s", exc)
        await message.reply_text(str(exc), do_quote=True)
        return
    await message.reply_text(draft.text, do_quote=True, reply_markup=CONFIRM_KEYBOARD)


async def confirm_callback(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handler for the Commit / Cancel buttons under a drafted entry."""
    query = update.callback_query
    if query is None or not _is_authorized(update, context):
        return
    await query.answer()

    message = query.message
    entry_text = getattr(message, "text", None)
    if message is None or entry_text is None:
        return

    if query.data == CALLBACK_COMMIT:
        original = message.reply_to_message.text if message.reply_to_message else None
        try:
            path = await asyncio.to_thread(_service(context).commit, entry_text, original)
        except REPORTED_ERRORS as exc:
            logger.error("Commit failed: %s", exc)
            await message.reply_text(str(exc))
            return
        logger.info("Entry committed to %s", path)
        status = COMMITTED_MARK
    elif query.data == CALLBACK_CANCEL:
        status = CANCELLED_MARK
    else:
        logger.warning("Unknown callback data: %r", query.data)
        return

    await query.edit_message_text(f"{entry_text}\n\n{status}")


def _proxy_url() -> str | None:
    return os.environ.get("HTTPS_PROXY") or os.environ.get("https_proxy")


def build_application(config: AppConfig, state: BotState | None = None) -> Application:
    """Create the Telegram application with all handlers registered."""
    builder = Application.builder().token(config.bot.token)
    proxy = _proxy_url()
    if proxy:
        builder = builder.proxy(proxy).get_updates_proxy(proxy)
    application = builder.build()

    application.bot_data["config"] = config
    application.bot_data["state"] = state if state is not None else load_state(config.bot.state_file)
    application.bot_data["service"] = LedgerService(config.beancount)

    application.add_handler(CommandHandler("auth", auth_command))
    application.add_handler(CommandHandler("accounts", accounts_command))
    application.add_handler(MessageHandler(filters.TEXT & ~filters.COMMAND, entry_message))
    application.add_handler(CallbackQueryHandler(confirm_callback, pattern=f"^({CALLBACK_COMMIT}|{CALLBACK_CANCEL})$"))
    return application


def run_bot(config: AppConfig) -> None:  # pragma: no cover - network loop
    """Start long polling until interrupted."""
    application = build_application(config)
    logger.info("Bot starting")
    application.run_polling(allowed_updates=["message", "callback_query"])
