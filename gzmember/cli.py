from __future__ import annotations

import sys
import argparse
import json as _json

from typing import Any, Dict, List, Optional

from gzmember.constants import DEFAULT_TEXT_ENCODING
from gzmember.header import Header, HeaderDecoder, check_text_encoding
from gzmember.errors import FormatError, TransportError


EXIT_OK = 0
EXIT_FORMAT = 1
EXIT_TRANSPORT = 2


def header_to_dict(h: Header) -> Dict[str, Any]:
    """Flatten a Header into JSON-friendly values."""
    xf = h.extra_field
    return {
        "compression_method": h.compression_method.name,
        "flags": h.flags.value,
        "flag_names": h.flags.names(),
        "reserved_flags": h.flags.reserved,
        "modification_time": h.modification_time,
        "extra_flags": h.extra_flags,
        "operating_system": h.operating_system.name,
        "extra_field": None
        if xf is None
        else {
            "subfield_id": xf.subfield_id.hex(),
            "length": xf.length,
            "data": xf.data.hex(),
        },
        "original_file_name": h.original_file_name,
        "comment": h.comment,
        "header_checksum": h.header_checksum,
        "header_length": h.header_length,
    }


def _format_lines(h: Header) -> List[str]:
    mtime = h.mtime_datetime
    lines = [
        f"method\t{h.compression_method.name} ({int(h.compression_method)})",
        f"flags\t0x{h.flags.value:02x} {' '.join(h.flags.names()) or '-'}",
        f"mtime\t{h.modification_time}" + (f" ({mtime.isoformat()})" if mtime else ""),
        f"xfl\t0x{h.extra_flags:02x}",
        f"os\t{h.operating_system.name} ({int(h.operating_system)})",
    ]
    if h.flags.reserved:
        lines.append(f"reserved\t0x{h.flags.reserved:02x}")
    if h.extra_field is not None:
        xf = h.extra_field
        lines.append(f"extra\t{xf.subfield_id.hex()} len={xf.length}")
    if h.original_file_name is not None:
        lines.append(f"name\t{h.original_file_name}")
    if h.comment is not None:
        lines.append(f"comment\t{h.comment}")
    if h.header_checksum is not None:
        lines.append(f"hcrc\t0x{h.header_checksum:04x}")
    lines.append(f"payload\t@{h.header_length}")
    return lines


def _inspect_one(path: str, decoder: HeaderDecoder) -> Dict[str, Any]:
    res: Dict[str, Any] = {"path": path, "status": "unknown"}
    try:
        if path == "-":
            h = decoder.decode(sys.stdin.buffer)
        else:
            with open(path, "rb") as fh:
                h = decoder.decode(fh)
    except FormatError as e:
        res["status"] = "format-error"
        res["message"] = str(e)
        return res
    except (TransportError, OSError) as e:
        res["status"] = "transport-error"
        res["message"] = str(e)
        return res
    res["status"] = "ok"
    res["header"] = h
    return res


def cmd_inspect(
    paths: List[str],
    *,
    as_json: bool = False,
    verify_crc: bool = False,
    encoding: str = DEFAULT_TEXT_ENCODING,
) -> int:
    """Decode and print the header of each gzip file.

    Args:
        paths: Files to inspect; "-" reads standard input.
        as_json: Emit one JSON document instead of tab-separated lines.
        verify_crc: Check the header CRC16 when the member carries one.
        encoding: Codec for the name and comment fields.

    Returns:
        Process exit status: 0 if every header decoded, 1 if any header was
        malformed, 2 if any input could not be read.
    """
    decoder = HeaderDecoder(encoding=encoding, verify_header_crc=verify_crc)
    results = [_inspect_one(p, decoder) for p in paths]

    status = EXIT_OK
    for r in results:
        if r["status"] == "transport-error":
            status = EXIT_TRANSPORT
        elif r["status"] == "format-error" and status == EXIT_OK:
            status = EXIT_FORMAT

    if as_json:
        out = []
        for r in results:
            item = {k: v for k, v in r.items() if k != "header"}
            if "header" in r:
                item["header"] = header_to_dict(r["header"])
            out.append(item)
        print(_json.dumps({"results": out, "ok": sum(1 for r in results if r["status"] == "ok")}))
        return status

    for r in results:
        if r["status"] != "ok":
            print(f"Error: {r['path']}: {r['message']}", file=sys.stderr)
            continue
        print(r["path"])
        for line in _format_lines(r["header"]):
            print("  " + line)
    return status


def main(argv: Optional[List[str]] = None):
    ap = argparse.ArgumentParser(
        prog="gzmember",
        description="gzip member header inspector",
    )
    sub = ap.add_subparsers(dest="cmd", required=True)

    ap_inspect = sub.add_parser("inspect", help="Decode and show member headers")
    ap_inspect.add_argument("paths", nargs="+", help="gzip files ('-' for stdin)")
    ap_inspect.add_argument("--json", action="store_true", help="Emit JSON result summary")
    ap_inspect.add_argument("--verify-crc", action="store_true", help="Check the header CRC16 when present")
    ap_inspect.add_argument(
        "--encoding",
        default=DEFAULT_TEXT_ENCODING,
        help=f"Text encoding for name/comment fields (default {DEFAULT_TEXT_ENCODING}; RFC 1952 says latin-1)",
    )

    args = ap.parse_args(argv)

    try:
        check_text_encoding(args.encoding)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(2)

    if args.cmd == "inspect":
        sys.exit(cmd_inspect(args.paths, as_json=args.json, verify_crc=args.verify_crc, encoding=args.encoding))
    raise RuntimeError("Unknown command")


if __name__ == "__main__":
    main()
