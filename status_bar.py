import os


MODE_LABELS = {"none": "VIEW", "cell": "CELL", "row": "ROW", "col": "COL"}


def _selection_text(selection):
    if selection.mode == "cell":
        return f"({selection.row}, {selection.col})"
    if selection.mode == "row":
        return f"row {selection.row}"
    if selection.mode == "col":
        return f"col {selection.col}"
    return ""


def build_context(state):
    view = state.view
    return {
        "mode": view.mode,
        "file_path": state.file_path,
        "shape": state.shape,
        "offset": view.offset,
        "selection": view.selection,
        "expanded": len(view.expanded_columns),
        "text_cut": view.text_cut,
    }


def render_status(context, width):
    """
    context keys: mode, file_path, shape, offset, selection, expanded, text_cut
    """
    mode = MODE_LABELS.get(context.get("mode", "none"), "VIEW")
    fname = context.get("file_path") or ""
    if fname:
        fname = os.path.basename(fname)
    else:
        fname = "[demo]"
    rows, cols = context.get("shape", (0, 0))
    off_row, off_col = context.get("offset", (0, 0))

    parts = [f" {mode}", fname, f"{rows}x{cols}", f"at {off_row},{off_col}"]
    selection = context.get("selection")
    if selection is not None:
        sel_text = _selection_text(selection)
        if sel_text:
            parts.append(sel_text)
    expanded = context.get("expanded", 0)
    if expanded:
        parts.append(f"expanded {expanded}")
    row_cut, col_cut = context.get("text_cut", (False, False))
    more = ("v" if row_cut else "") + (">" if col_cut else "")
    if more:
        parts.append(more)

    text = " | ".join(parts)
    return text.ljust(width)[:width]
