"""Line-aligned splitting of long Slack messages."""

# chat.postMessage truncates text beyond ~4000 characters; keep headroom.
SLACK_MAX_CHUNK = 3500


def chunk_text(text: str, max_length: int = SLACK_MAX_CHUNK) -> list[str]:
    """Split ``text`` on newlines into the fewest chunks of at most ``max_length``.

    Lines are accumulated greedily and never split. A single line longer than
    ``max_length`` becomes its own oversized chunk. Joining the chunks with
    ``"\\n"`` reproduces ``text``. Empty input yields no chunks.
    """
    if not text:
        return []

    chunks: list[str] = []
    current: list[str] = []
    current_length = 0

    for line in text.split("\n"):
        if current and current_length + 1 + len(line) > max_length:
            chunks.append("\n".join(current))
            current = []
            current_length = 0

        current_length += len(line) + (1 if current else 0)
        current.append(line)

    if current:
        chunks.append("\n".join(current))
    return chunks
