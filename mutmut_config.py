def get_indentation(string):
    return len(string) - len(string.lstrip())


def pre_mutation(context):
    if context.filename.endswith("version.py"):
        context.skip = True
        return

    # Skip message texts of reports.xxx(...) calls
    line_no = context.current_line_index
    cur_indentation = get_indentation(context.source_by_line_number[line_no])
    while line_no > 0:
        line_no -= 1
        line = context.source_by_line_number[line_no]
        indentation = get_indentation(line)
        if indentation < cur_indentation:
            cur_indentation = indentation
            if "reports." in line:
                if line_no < context.current_line_index - 1:
                    # Don't skip report identifiers
                    context.skip = True
                return
