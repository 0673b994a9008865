import logging

import pairtok as ptok

# Configure logging to show INFO level and above.
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    datefmt="%H:%M:%S",
)


def main() -> None:
    """Train a tiny tokenizer and round-trip its own training text."""
    text = "hello world the sky is blue"
    vocab_size = 300

    print(f"Input text: {text}")
    tok = ptok.create_tokenizer()
    ptok.train(tok, text, vocab_size, verbose=True)

    ids = ptok.encode(tok, text)
    decoded = ptok.decode(tok, ids).decode("utf-8", errors="replace")

    print(f"Encoded ids: {' '.join(map(str, ids))}")
    print(f"Decoded text: {decoded}")


if __name__ == "__main__":
    main()
