"""Benchmark training, encoding and decoding on a slice of the Sci-Fi Gutenberg dataset.

Outputs one markdown table row:
  Corpus Size | Vocab Size | Merges | Training Time | Encoding Throughput |
  Decoding Throughput | Compression Ratio
"""

import argparse
import logging
import time

from datasets import load_dataset

import pairtok as ptok

HF_DATASET = "stevez80/Sci-Fi-Books-gutenberg"


def load_corpus(num_docs: int, max_chars: int) -> str:
    """Join the first ``num_docs`` documents and cut the result to ``max_chars``."""
    print(f"Loading {HF_DATASET} (non-streaming) …")
    ds = load_dataset(HF_DATASET, split="train")
    return "".join(ds[:num_docs]["text"])[:max_chars]


def main() -> None:
    """Run the benchmark and print a markdown-compatible row."""
    parser = argparse.ArgumentParser(description="Benchmark pairtok train/encode/decode.")
    parser.add_argument(
        "--num-docs",
        type=int,
        default=1,
        help="Number of documents to join into the corpus (default: 1).",
    )
    parser.add_argument(
        "--max-chars",
        type=int,
        default=20_000,
        help="Truncate the corpus to this many characters (default: 20,000).",
    )
    parser.add_argument(
        "--vocab-size",
        type=int,
        default=512,
        help="Vocab size for training (default: 512).",
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Log every learned merge."
    )
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S",
    )

    text = load_corpus(args.num_docs, args.max_chars)
    if not text:
        raise RuntimeError("No text loaded from dataset.")
    total_bytes = len(text.encode("utf-8"))

    tok = ptok.create_tokenizer()

    # --- Training ---
    t0 = time.perf_counter()
    ptok.train(tok, text, args.vocab_size, verbose=args.verbose)
    train_secs = time.perf_counter() - t0

    # --- Encoding ---
    t0 = time.perf_counter()
    ids = ptok.encode(tok, text)
    encode_secs = time.perf_counter() - t0

    # --- Decoding ---
    t0 = time.perf_counter()
    decoded = ptok.decode(tok, ids)
    decode_secs = time.perf_counter() - t0

    if decoded != text.encode("utf-8"):
        raise RuntimeError("Round-trip failed: decoded bytes differ from input.")

    compression_ratio = total_bytes / max(len(ids), 1)

    print()
    print(
        "| Corpus Size | Vocab Size | Merges | Training Time "
        "| Encoding Throughput | Decoding Throughput | Compression Ratio |"
    )
    print("| --- | --- | --- | --- | --- | --- | --- |")
    print(
        f"| {total_bytes / 1024:.1f} KB | {tok.vocab_size():,} | {len(tok.merges):,} "
        f"| {train_secs:.2f} secs | {total_bytes / encode_secs / 1024:.1f} KB/sec "
        f"| {len(ids) / decode_secs:,.0f} tokens/sec | {compression_ratio:.2f}x |"
    )
    print()


if __name__ == "__main__":
    main()
