# Sample agreement offered to users who have not uploaded anything yet

SAMPLE_TITLE = 'Sample Professional Services Agreement'
SAMPLE_FILENAME = 'Sample_Professional_Services_Agreement.txt'

SAMPLE_CONTRACT = """PROFESSIONAL SERVICES AGREEMENT

This Professional Services Agreement ("Agreement") is entered into on [DATE] between TechCorp Solutions, LLC, a Delaware limited liability company ("Provider"), and ClientCorp Inc., a California corporation ("Client").

1. SERVICES
Provider agrees to provide software development and consulting services as outlined in the attached Statement of Work. The services shall include but not be limited to: system architecture design, software development, testing, and deployment support.

2. COMPENSATION
Client agrees to pay Provider a total fee of $50,000 for the services described herein. Payment shall be made in three installments: 30% upon execution of this Agreement, 40% upon completion of development milestones, and 30% upon final delivery and acceptance.

3. TERM AND TERMINATION
This Agreement shall commence on the effective date and continue until completion of all services, unless terminated earlier. Either party may terminate this Agreement with thirty (30) days written notice to the other party. In the event of termination, Client shall pay for all services performed up to the termination date.

4. INTELLECTUAL PROPERTY
All work product, including but not limited to software code, documentation, and deliverables created by Provider in connection with this Agreement shall become the exclusive property of Client upon full payment. Provider retains ownership of any pre-existing intellectual property and general methodologies.

5. CONFIDENTIALITY
Both parties acknowledge that they may have access to confidential and proprietary information of the other party. Each party agrees to maintain in confidence all confidential information received from the other party and not to disclose such information to third parties without prior written consent.

6. INDEMNIFICATION
Provider shall indemnify, defend, and hold harmless Client from and against any and all claims, damages, losses, costs, and expenses (including reasonable attorneys' fees) arising out of or resulting from Provider's negligent performance of services under this Agreement.

7. LIMITATION OF LIABILITY
IN NO EVENT SHALL EITHER PARTY BE LIABLE FOR ANY INDIRECT, INCIDENTAL, SPECIAL, CONSEQUENTIAL, OR PUNITIVE DAMAGES, INCLUDING BUT NOT LIMITED TO LOSS OF PROFITS, DATA, OR USE, REGARDLESS OF THE THEORY OF LIABILITY.

8. GOVERNING LAW AND JURISDICTION
This Agreement shall be governed by and construed in accordance with the laws of the State of California, without regard to its conflict of laws principles. Any disputes arising under this Agreement shall be resolved exclusively in the state and federal courts located in San Francisco County, California.

9. ENTIRE AGREEMENT
This Agreement constitutes the entire agreement between the parties and supersedes all prior negotiations, representations, or agreements relating to the subject matter herein. This Agreement may only be modified in writing signed by both parties.

IN WITNESS WHEREOF, the parties have executed this Agreement as of the date first written above.

PROVIDER:                          CLIENT:
TechCorp Solutions, LLC           ClientCorp Inc.

By: _____________________         By: _____________________
Name: John Smith                  Name: Jane Doe
Title: Managing Member            Title: CEO
Date: _______________            Date: _______________
"""
