import pytest

SAMPLE_REPORT = """<?xml version="1.0" standalone="yes" ?>
<!-- generated by lshw -->
<list>
<node id="workstation" claimed="true" class="system" handle="DMI:0001">
 <description>Desktop Computer</description>
 <product>OptiPlex 7070</product>
 <vendor>Dell Inc.</vendor>
 <node id="core" claimed="true" class="bus" handle="DMI:0002">
  <description>Motherboard</description>
  <product>0YNVJG</product>
  <node id="memory" claimed="true" class="memory" handle="DMI:0003">
   <description>System Memory</description>
   <size units="bytes">17179869184</size>
   <node id="bank:0" claimed="true" class="memory" handle="DMI:0004">
    <description>DIMM DDR4 Synchronous 2666 MHz</description>
    <vendor>SK Hynix</vendor>
    <size units="bytes">8589934592</size>
   </node>
  </node>
  <node id="cpu" claimed="true" class="processor" handle="DMI:0005">
   <description>CPU</description>
   <product>Intel(R) Core(TM) i7-9700 CPU @ 3.00GHz</product>
   <vendor>Intel Corp.</vendor>
   <businfo>cpu@0</businfo>
  </node>
  <node id="pci" claimed="true" class="bridge" handle="PCIBUS:0000:00">
   <description>Host bridge</description>
   <vendor>Intel Corporation</vendor>
   <node id="pci:0" claimed="true" class="bridge" handle="PCIBUS:0000:01">
    <description>PCI bridge</description>
    <vendor>Intel Corporation</vendor>
   </node>
   <node id="isa" claimed="true" class="bridge" handle="PCI:0000:00:1f.0">
    <description>ISA bridge</description>
    <vendor>Intel Corporation</vendor>
   </node>
   <node id="usbhost" claimed="true" class="bus" handle="USB:1:1">
    <description>USB hub</description>
    <vendor>Linux 5.15.0 xhci-hcd</vendor>
   </node>
   <node id="usb:1" claimed="true" class="bus" handle="USB:2:2">
    <description>USB 3.0 Hub</description>
    <vendor>Generic</vendor>
   </node>
   <node id="network" claimed="true" class="network" businfo="pci@0000:00:1f.6">
    <description>Ethernet interface</description>
    <product>Ethernet Connection (7) I219-LM</product>
    <vendor>Intel Corporation</vendor>
    <logicalname>eno1</logicalname>
    <logicalname>eno1np0</logicalname>
    <configuration>
     <setting id="driver" value="e1000e" />
     <setting id="speed" value="1Gbit/s" />
    </configuration>
    <capabilities>
     <capability id="pm" >Power Management</capability>
     <capability id="ethernet" />
    </capabilities>
   </node>
   <node id="sata" claimed="true" class="storage" businfo="pci@0000:00:17.0">
    <description>SATA controller</description>
    <node id="disk" claimed="true" class="disk" businfo="scsi@0:0.0.0">
     <description>ATA Disk</description>
     <product>Samsung SSD 860</product>
     <vendor>Samsung</vendor>
     <logicalname>/dev/sda</logicalname>
    </node>
   </node>
  </node>
 </node>
 <node id="network:1" class="network" disabled="true" vendor="AMD">
  <description>Wireless interface</description>
  <vendor>AMD</vendor>
 </node>
</node>
</list>
"""


@pytest.fixture
def sample_report():
    """Return a trimmed lshw -xml report."""
    return SAMPLE_REPORT


@pytest.fixture
def report_file(tmp_path):
    path = tmp_path / "lshw.xml"
    path.write_text(SAMPLE_REPORT, encoding="utf-8")
    return path
