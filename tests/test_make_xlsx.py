import zipfile

from ec2_reservations import make_xlsx
from ec2_reservations.mytypes import ReportedInstance


def test_workbook_has_both_worksheets(tmp_path):
    filename = make_xlsx.main(str(tmp_path / 'report'), [
        ReportedInstance('m3.medium', 3, 'us-east-1a'),
        ReportedInstance('t2.micro', 1, 'us-east-1b'),
    ], [])
    assert filename == str(tmp_path / 'report.xlsx')
    with zipfile.ZipFile(filename) as z:
        workbook = z.read('xl/workbook.xml').decode('utf-8')
        sheet1 = z.read('xl/worksheets/sheet1.xml').decode('utf-8')
    assert 'name="On-demand instances"' in workbook
    assert 'name="Unused reservations"' in workbook
    assert 'SUM(C2:C3)' in sheet1
