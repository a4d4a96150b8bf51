import os
import time


def render_status(context, width):
    """
    context keys: status_msg, status_until, mode, file_path, shape, cursor,
                  edit_text, dirty
    """
    text = ""
    now = time.time()
    if context.get("status_msg") and now < context.get("status_until", 0):
        text = f" {context['status_msg']}"
    else:
        mode = context.get("mode", "VISUAL")
        fname = context.get("file_path") or ""
        if fname:
            fname = os.path.basename(fname)
        if context.get("dirty"):
            fname += " [+]"
        rows, cols = context.get("shape", (0, 0))
        row, col = context.get("cursor", (0, 0))
        text = f" {mode} | {fname} | {rows}x{cols} | R{row + 1} C{col + 1}"
        edit_text = context.get("edit_text")
        if edit_text is not None:
            text += f" | {edit_text}"

    return text.ljust(width)[:width]
