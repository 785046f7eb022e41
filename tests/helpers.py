"""Test helpers: in-memory PDF builder and a recording chat backend."""

from src.models.schemas import ChatMessage

PAGE_ONE_TEXT = (
    "Revenue grew twelve percent in the third quarter, "
    "driven by strong demand in the northern region."
)
PAGE_THREE_TEXT = (
    "Operating costs fell four percent after the warehouse consolidation "
    "was completed in September."
)


def build_pdf(page_texts: list[str]) -> bytes:
    """Build a minimal PDF with one line of Helvetica text per page.

    An empty string produces a page with an empty content stream, which
    is what a scanned page looks like to a digital text extractor.
    Texts must not contain parentheses or backslashes.
    """
    count = len(page_texts)
    page_ids = [4 + 2 * i for i in range(count)]
    kids = " ".join(f"{pid} 0 R" for pid in page_ids)

    objects: list[bytes] = [
        b"<< /Type /Catalog /Pages 2 0 R >>",
        f"<< /Type /Pages /Kids [{kids}] /Count {count} >>".encode(),
        b"<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica >>",
    ]
    for page_id, text in zip(page_ids, page_texts):
        objects.append(
            (
                "<< /Type /Page /Parent 2 0 R /MediaBox [0 0 612 792] "
                "/Resources << /Font << /F1 3 0 R >> >> "
                f"/Contents {page_id + 1} 0 R >>"
            ).encode()
        )
        stream = f"BT /F1 10 Tf 20 720 Td ({text}) Tj ET".encode() if text else b""
        objects.append(b"<< /Length %d >>\nstream\n" % len(stream) + stream + b"\nendstream")

    out = bytearray(b"%PDF-1.4\n")
    offsets = []
    for number, body in enumerate(objects, start=1):
        offsets.append(len(out))
        out += b"%d 0 obj\n" % number + body + b"\nendobj\n"

    xref_offset = len(out)
    out += b"xref\n0 %d\n" % (len(objects) + 1)
    out += b"0000000000 65535 f \n"
    for offset in offsets:
        out += b"%010d 00000 n \n" % offset
    out += b"trailer\n<< /Size %d /Root 1 0 R >>\n" % (len(objects) + 1)
    out += b"startxref\n%d\n%%%%EOF\n" % xref_offset
    return bytes(out)


class FakeBackend:
    """Chat backend that records messages and returns a canned reply."""

    def __init__(self, response: str = "", error: Exception | None = None) -> None:
        self.response = response
        self.error = error
        self.calls: list[list[ChatMessage]] = []

    async def chat(self, messages: list[ChatMessage]) -> str:
        self.calls.append(messages)
        if self.error is not None:
            raise self.error
        return self.response

    @property
    def last_user_message(self) -> str:
        return self.calls[-1][-1].content
