'''recentscan 명령줄 패키지(KR). recentscan command line package (EN).'''
