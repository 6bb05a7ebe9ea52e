from typing import Optional

PHOTOSHOOT_PROMPT = (
    "Create a photorealistic e-commerce product photo of the pet from image 1 "
    "wearing or using the product from image 2. "
    "Keep the pet's face, fur colour and markings exactly as in image 1, and keep the "
    "product's shape, colours and details exactly as in image 2 so it is clearly visible. "
    "Use soft, even studio lighting on a clean neutral background, sharp focus and a "
    "natural pose, framed so the image is ready for a product detail page."
)

INSTRUCTIONS_PREFIX = "Additional instructions from the customer:"


def build_prompt(instructions: Optional[str] = None) -> str:
    """Fixed photoshoot prompt, with the customer's instructions appended when given."""
    extra = (instructions or "").strip()
    if not extra:
        return PHOTOSHOOT_PROMPT
    return f"{PHOTOSHOOT_PROMPT}\n\n{INSTRUCTIONS_PREFIX} {extra}"
