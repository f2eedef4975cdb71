import openai


DEFAULT_MODEL = "gemini-2.5-flash"
DEFAULT_BASE_URL = "https://generativelanguage.googleapis.com/v1beta/openai/"
# No client side timeout, wait for the service to answer or fail.
TIMEOUT = None


def openai_client_factory(
    token: str,
    *,
    base_url: str = DEFAULT_BASE_URL,
) -> openai.AsyncClient:
    return openai.AsyncClient(
        api_key=token,
        base_url=base_url,
        timeout=TIMEOUT,
        max_retries=0,
    )


async def quick_chat(
    msg: str,
    *,
    openai_client: openai.AsyncClient,
    model: str = DEFAULT_MODEL,
) -> str:
    """One user message in, the reply text out, untouched."""
    resp = await openai_client.chat.completions.create(
        model=model,
        messages=[{"role": "user", "content": msg}],
    )
    if not resp.choices:
        raise ValueError(f"Problem creating completion, no choices. {resp}")
    ans = resp.choices[0].message.content
    if ans is None:
        raise ValueError(f"Problem creating completion, no content. {resp}")
    return ans
