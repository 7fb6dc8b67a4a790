from __future__ import annotations

import argparse
from pathlib import Path

from pybase45 import decode_qr_base45, make_qr_code, packing_stats


def main() -> None:
    parser = argparse.ArgumentParser(description="Store a binary file in a QR code via base45.")
    parser.add_argument("input", type=Path, help="file to encode")
    parser.add_argument("--svg", type=Path, help="write the QR code as SVG to this path")
    parser.add_argument(
        "--variant", choices=("qr", "standard"), default="qr", help="base45 flavour to use"
    )
    args = parser.parse_args()

    payload = args.input.read_bytes()
    stats = packing_stats(payload, variant=args.variant)
    print(
        f"raw={stats.raw_bytes} chars={stats.encoded_chars} "
        f"packed={stats.packed_bytes} overhead={stats.overhead:.2%}"
    )

    qr = make_qr_code(payload, variant=args.variant, border=1)
    if args.variant == "qr":
        text = qr.data_list[0].data.decode("ascii")
        assert decode_qr_base45(text) == payload

    if args.svg:
        from qrcode.image.svg import SvgImage

        img = qr.make_image(image_factory=SvgImage)
        args.svg.write_bytes(img.to_string())
        print(f"wrote {args.svg}")
    else:
        qr.print_ascii(invert=True)


if __name__ == "__main__":
    main()
