"""Prompt construction for document-grounded answers."""

PROMPT_TEMPLATE = """You are DocQA Assistant. Answer concisely using only the PDF provided. \
If not found, say "Not found in the document."

Document: {document_name}
Context (excerpts by page):
{excerpts}

Question: {question}

Respond with:
- Short answer (1-2 sentences)
- 1-2 quoted excerpts with page numbers
- Confidence (High/Medium/Low with reason)"""


def page_excerpts(pages: list[str], max_chars: int = 1200) -> list[str]:
    """Label each page and cut it to at most ``max_chars`` characters of text."""
    return [f"Page {number}: {text[:max_chars]}" for number, text in enumerate(pages, start=1)]


def build_prompt(
    question: str,
    document_name: str,
    pages: list[str],
    max_chars: int = 1200,
) -> str:
    """Build the instruction prompt sent to the generative endpoint.

    Args:
        question: The user's question.
        document_name: Filename shown to the model.
        pages: Extracted page texts in page order.
        max_chars: Per-page excerpt limit.

    Returns:
        The complete prompt text.
    """
    return PROMPT_TEMPLATE.format(
        document_name=document_name,
        excerpts="\n\n".join(page_excerpts(pages, max_chars)),
        question=question,
    )
