"""
e스포츠 상금 분석 엔진 (장르별 집계, 점유율 배치, 추세선, 분포).
"""
