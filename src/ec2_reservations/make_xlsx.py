import itertools

import xlsxwriter


def _to_alpha(x):
    return chr(ord('A') + x)


def gen_reported_instances(workbook, title, refs, rows, header_format, val_format):
    worksheet = workbook.add_worksheet(title)

    worksheet.freeze_panes(1, 0)
    worksheet.set_column(0, len(refs) - 1, 20)
    for v in refs.values():
        worksheet.write(0, v[0], v[1], header_format)
    for i, ri in zip(itertools.count(1), rows):
        line = ri._asdict()
        for h, v in refs.items():
            worksheet.write(i, v[0], line[h], val_format)

    total_row = len(rows) + 1
    count_col = refs["count"][0]
    worksheet.write(total_row, 0, "Total", header_format)
    if rows:
        worksheet.write_formula(
            total_row, count_col,
            "=SUM({0}2:{0}{1})".format(_to_alpha(count_col), total_row),
            header_format,
            sum(ri.count for ri in rows),
        )
    else:
        worksheet.write(total_row, count_col, 0, header_format)
    return worksheet


def main(name, on_demand, unused):
    filename = '{}.xlsx'.format(name)
    workbook = xlsxwriter.Workbook(filename)

    header_format = workbook.add_format()
    header_format.set_bold()
    header_format.set_align("center")
    header_format.set_align("vcenter")
    header_format.set_border()

    val_format = workbook.add_format()
    val_format.set_align("center")
    val_format.set_align("vcenter")
    val_format.set_border()

    gen_reported_instances(workbook, "On-demand instances", {
        "type": [0, "Instance type"],
        "availability_zone": [1, "Availability zone"],
        "count": [2, "Count"],
    }, on_demand, header_format, val_format)
    gen_reported_instances(workbook, "Unused reservations", {
        "type": [0, "Instance type"],
        "count": [1, "Count"],
    }, unused, header_format, val_format)

    workbook.close()
    return filename
