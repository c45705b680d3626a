"""Per-file relay: Slack -> S3 -> presigned link -> short link -> thread reply.

Files are processed one at a time in the order Slack listed them, so replies
appear in the thread in the same order. Every file yields exactly one
RelayResult; one file's failure never stops the next.
"""

import logging

from file_relay.clients import RelayClients
from file_relay.errors import DownstreamError, FileValidationError
from file_relay.models.relay import Failed, Rejected, RelayResult, RelayStage, Uploaded
from file_relay.models.slack import CallbackEvent, FileRef
from file_relay.relay.validation import content_type_for, validate_filename

logger = logging.getLogger(__name__)


async def relay(event: CallbackEvent, clients: RelayClients) -> list[RelayResult]:
    """Relay every file attached to ``event`` and return one result per file."""
    results: list[RelayResult] = []

    for file in event.files:
        try:
            result = await relay_file(event, file, clients)
        except Exception as exc:
            logger.error("Relay failed for file %s: %s", file.id, exc, exc_info=True)
            await _notify_unexpected(event, file, clients)
            result = Failed(
                file_id=file.id, name=file.name, stage=RelayStage.PROCESSING, cause=str(exc)
            )
        results.append(result)

    logger.info(
        "Relayed %d/%d file(s) for message %s in %s",
        sum(isinstance(r, Uploaded) for r in results),
        len(results),
        event.ts,
        event.channel,
    )
    return results


async def relay_file(event: CallbackEvent, file: FileRef, clients: RelayClients) -> RelayResult:
    """Run one file through download, delete, validate, upload, presign, shorten, notify.

    The Slack copy is deleted right after a successful download and before the
    name is validated, so rejected files are removed from Slack as well.
    """
    channel, ts = event.channel, event.ts
    notifier = clients.notifier

    # Stage 1: Download from Slack
    try:
        data = await clients.files.download(file.url_private_download, file.name)
    except DownstreamError as exc:
        return await _failed(event, file, exc, clients)
    file = file.model_copy(update={"binary": data})

    # Stage 2: Delete the Slack copy; failure is reported but not fatal
    try:
        await clients.files.delete(file.id)
    except DownstreamError as exc:
        logger.warning("Could not delete Slack file %s: %s", file.id, exc.cause)
        await notifier.notify_error(channel, ts, file.name, exc.stage)

    # Stage 3: Filename policy
    try:
        validate_filename(file.name)
    except FileValidationError as exc:
        logger.info("Rejected file %s (%s): %s", file.id, file.name, exc.reason)
        await notifier.notify_rejected(channel, ts, file.name, exc.reason)
        return Rejected(file_id=file.id, name=file.name, reason=exc.reason)

    # Stages 4-6: Upload, presign, shorten
    try:
        await clients.store.put(file.name, file.binary, content_type_for(file.name))
        signed_url = await clients.store.presign(file.name)
        short_url = await clients.shortener.shorten(signed_url)
    except DownstreamError as exc:
        return await _failed(event, file, exc, clients)

    # Stage 7: Reply in thread
    if not await notifier.notify_success(channel, ts, file.name, short_url):
        return Failed(
            file_id=file.id,
            name=file.name,
            stage=RelayStage.NOTIFY,
            cause="chat.postMessage failed",
        )

    logger.info("Relay complete for file %s -> %s", file.id, short_url)
    return Uploaded(file_id=file.id, name=file.name, short_url=short_url)


async def _failed(
    event: CallbackEvent, file: FileRef, exc: DownstreamError, clients: RelayClients
) -> Failed:
    """Log and announce a downstream failure, returning its result."""
    logger.error("Stage %s failed for file %s: %s", exc.stage.value, file.id, exc.cause)
    await clients.notifier.notify_error(event.channel, event.ts, file.name, exc.stage)
    return Failed(file_id=file.id, name=file.name, stage=exc.stage, cause=exc.cause)


async def _notify_unexpected(event: CallbackEvent, file: FileRef, clients: RelayClients) -> None:
    """Announce an unclassified failure. Never raises, so the next file still runs."""
    try:
        await clients.notifier.notify_error(
            event.channel, event.ts, file.name, RelayStage.PROCESSING
        )
    except Exception:
        logger.warning("Could not announce failure of file %s", file.id, exc_info=True)
