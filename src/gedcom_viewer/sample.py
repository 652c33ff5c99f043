"""
Bundled sample family, loaded when no GEDCOM file is given.
"""

SAMPLE_GEDCOM = """\
0 HEAD
1 SOUR FAMILY_SEARCH
1 GEDC
2 VERS 5.5.1
2 FORM LINEAGE-LINKED
1 CHAR UTF-8
0 @I1@ INDI
1 NAME João /Silva/
1 SEX M
1 BIRT
2 DATE 10 JAN 1980
2 PLAC São Paulo, Brasil
1 FAMS @F1@
1 FAMC @F2@
1 OBJE
2 FILE https://images.unsplash.com/photo-1507003211169-0a1dd7228f2d?fit=crop&w=200&h=200
0 @I2@ INDI
1 NAME Maria /Santos/
1 SEX F
1 BIRT
2 DATE 15 MAR 1982
2 PLAC Rio de Janeiro, Brasil
1 FAMS @F1@
1 OBJE
2 FILE https://images.unsplash.com/photo-1438761681033-6461ffad8d80?fit=crop&w=200&h=200
0 @I3@ INDI
1 NAME Pedro /Silva/
1 SEX M
1 BIRT
2 DATE 20 MAY 2010
2 PLAC Curitiba, Brasil
1 FAMC @F1@
0 @I4@ INDI
1 NAME Antônio /Silva/
1 SEX M
1 BIRT
2 DATE 05 JUN 1950
2 PLAC Lisboa, Portugal
1 DEAT
2 DATE 12 DEC 2020
2 PLAC São Paulo, Brasil
1 FAMS @F2@
0 @I5@ INDI
1 NAME Ana /Oliveira/
1 SEX F
1 BIRT
2 DATE 22 AUG 1955
2 PLAC Porto, Portugal
1 FAMS @F2@
0 @I6@ INDI
1 NAME Manuel /Silva/
1 SEX M
1 BIRT
2 DATE 1920
1 DEAT
2 DATE 1990
1 FAMS @F3@
0 @I7@ INDI
1 NAME Rosa /Pereira/
1 SEX F
1 BIRT
2 DATE 1925
1 DEAT
2 DATE 2000
1 FAMS @F3@
0 @I8@ INDI
1 NAME Carlos /Silva/
1 SEX M
1 BIRT
2 DATE 1978
1 FAMC @F2@
0 @F1@ FAM
1 HUSB @I1@
1 WIFE @I2@
1 CHIL @I3@
0 @F2@ FAM
1 HUSB @I4@
1 WIFE @I5@
1 CHIL @I1@
1 CHIL @I8@
0 @F3@ FAM
1 HUSB @I6@
1 WIFE @I7@
1 CHIL @I4@
0 TRLR
"""
