"""
Example LINE bot handler

Reads a webhook body (JSON) from a file and answers every event with
LineContext helpers. Set LINE_CHANNEL_ACCESS_TOKEN before running:

    python bot_example.py webhook.json
"""

import asyncio
import logging
import sys

from line_api import LineEvent, build_context, get_default_api_client

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

logger = logging.getLogger(__name__)


async def handle_event(ctx):
    """Echo text messages and greet new friends"""
    event = ctx.event
    
    if event.is_follow:
        await ctx.reply_text("Thanks for adding me! 👋")
        return
    
    if event.is_text:
        text = event.text.strip()
        if text.lower() == "sticker":
            await ctx.reply_sticker("446", "1988")
        elif text.lower() == "where":
            await ctx.reply_location("LINE Corporation", "Tokyo, Japan", 35.6804, 139.7690)
        else:
            await ctx.reply_text(f"You said: {text}")
            # The reply token is gone, follow-ups have to be pushed
            await ctx.send_text("Anything else?")


async def main(path: str):
    """Dispatch every event in the webhook body to the handler"""
    with open(path, "r", encoding="utf-8") as f:
        events = LineEvent.parse_webhook(f.read())
    
    client = get_default_api_client()
    try:
        contexts = [build_context(event, api_client=client, message_delay=500) for event in events]
        await asyncio.gather(*(handle_event(ctx) for ctx in contexts))
    except Exception as e:
        logger.error(f"Error handling webhook: {e}", exc_info=True)
        raise
    finally:
        client.close()


if __name__ == "__main__":
    if len(sys.argv) != 2:
        print("Usage: python bot_example.py <webhook.json>")
        sys.exit(1)
    try:
        asyncio.run(main(sys.argv[1]))
    except KeyboardInterrupt:
        logger.info("Program interrupted by user")
