# mandelplot/utils.py

def parse_complex(s: str) -> complex:
    """
    Parse strings like '-3+2j', '1-1i', '0.5j' or '0.25' into a complex number.
    """
    text = s.strip().lower().replace(" ", "")
    if text.endswith("i"):
        text = text[:-1] + "j"
    try:
        if text.endswith("j"):
            return complex(text)
        # allow plain real numbers too
        return complex(float(text), 0.0)
    except ValueError:
        raise ValueError(f"not a complex number: {s!r}") from None
