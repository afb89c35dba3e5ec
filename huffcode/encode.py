import argparse, logging, os, sys
from huffcode.codec import HuffmanCoding
from huffcode.errors import HuffmanError
from huffcode.stats import entropy, average_code_length, compression_ratio

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"

def setup_logging(verbose: bool):
    logging.basicConfig(level=logging.DEBUG if verbose else logging.INFO, format=LOG_FORMAT)

def main(argv=None):
    ap = argparse.ArgumentParser(description="Huffman-encode an ASCII text file.")
    ap.add_argument("--input", required=True, help="path to source text (ASCII 1..127)")
    ap.add_argument("--output", required=True, help="path to encoded output")
    ap.add_argument("--table", action="store_true", help="print the code table")
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args(argv)
    setup_logging(args.verbose)

    hc = HuffmanCoding(args.input)
    try:
        hc.build()
        ok = hc.encode(args.output)
    except HuffmanError as e:
        print(f"[encode] error: {e}", file=sys.stderr)
        return 1
    if not ok:
        print(f"[encode] failed to write {args.output}", file=sys.stderr)
        return 1

    src_size = os.path.getsize(args.input)
    enc_size = os.path.getsize(args.output)
    freqs = hc.sorted_char_freq_list
    print(f"[encode] wrote {args.output}")
    print(f"[encode] symbols={len(freqs)} size={src_size}B -> {enc_size}B ratio={compression_ratio(src_size, enc_size):.3f}")
    print(f"[encode] entropy={entropy(freqs):.4f} avg_len={average_code_length(freqs, hc.encodings):.4f} bits/char")
    if args.table:
        for e in sorted(freqs, reverse=True):
            print(f"  {e.character!r:>8} p={e.probability:.6f} {hc.encodings[e.character]}")
    return 0

if __name__ == "__main__":
    sys.exit(main())
